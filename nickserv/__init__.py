from . import protocol, host, profiles, config, credentials, dispatch, detection, services

from .protocol import Error, NoMatchingProfile, CredentialNotFound, SendFailed, ConfigError, \
    MODE_AUTODETECT as AUTODETECT, MODE_NICK_CHANGE as NICK_CHANGE, MODE_BOTH as BOTH, MODE_DISABLED as DISABLED
from .host import Host, Message
from .profiles import NetworkProfile, ProfileRegistry, DEFAULT_PROFILES
from .config import Config
from .credentials import CredentialResolver
from .dispatch import IdentifyDispatcher
from .detection import DetectionEngine
from .services import Services

__name__ = 'nickserv'
__version__ = '0.1.0'
__version_info__ = (0, 1, 0)
__license__ = 'BSD'
