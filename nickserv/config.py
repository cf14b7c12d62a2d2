## config.py
# Operator configuration: credentials, resolver switches and profile overrides.
import configparser
import logging

from . import protocol
from .profiles import NetworkProfile

__all__ = [ 'Config', 'load' ]

logger = logging.getLogger(__name__)


MAIN_SECTION = 'nickserv'
PASSWORDS_SECTION = 'passwords'
PROFILE_SECTION = 'profile'

PROFILE_KEYS = {
    'sender': 'service_sender',
    'request': 'identify_request_pattern',
    'service': 'service_nick',
    'keyword': 'identify_keyword',
    'include_nick': 'include_nick_in_message',
    'command': 'dispatch_command',
    'success': 'success_pattern',
}
FLAG_KEYS = {
    'use_passwords': 'use_passwords',
    'use_secret_store': 'use_secret_store',
    'prompt_for_password': 'prompt_for_password',
    'always_detect_success': 'always_detect_success',
}


class Config:
    """
    Operator configuration.
    Everything here is read again at the start of every resolution and detection,
    so changes take effect on the next message without restarting anything.
    """
    MODE = protocol.MODE_BOTH
    USE_PASSWORDS = True
    USE_SECRET_STORE = False
    PROMPT_FOR_PASSWORD = True
    ALWAYS_DETECT_SUCCESS = False

    def __init__(self, passwords=None, profiles=None, mode=None, use_passwords=None, use_secret_store=None,
                 prompt_for_password=None, always_detect_success=None):
        # {network: {nickname: password}}
        self.passwords = { network: dict(nicknames) for network, nicknames in (passwords or {}).items() }
        # {network: NetworkProfile}
        self.profiles = dict(profiles or {})
        self.mode = protocol.normalize_mode(mode if mode is not None else self.MODE)
        self.use_passwords = self.USE_PASSWORDS if use_passwords is None else use_passwords
        self.use_secret_store = self.USE_SECRET_STORE if use_secret_store is None else use_secret_store
        self.prompt_for_password = self.PROMPT_FOR_PASSWORD if prompt_for_password is None else prompt_for_password
        self.always_detect_success = self.ALWAYS_DETECT_SUCCESS if always_detect_success is None else always_detect_success

    def password(self, network, nickname):
        """ The configured password for nickname on network, or None. """
        return self.passwords.get(network, {}).get(nickname)

    def set_password(self, network, nickname, password):
        self.passwords.setdefault(network, {})[nickname] = password

    def add_profile(self, profile):
        """ Add or replace a profile override. """
        self.profiles[profile.network_id] = profile


## Loading.

def load(path, config=None):
    """ Read an INI configuration file into a Config. Raise ConfigError on malformed values. """
    parser = configparser.ConfigParser(interpolation=None)
    # Nicknames are case-sensitive.
    parser.optionxform = str

    try:
        with open(path, encoding='utf-8') as f:
            parser.read_file(f)
    except configparser.Error as e:
        raise protocol.ConfigError('Could not parse {}: {}'.format(path, e)) from e

    return from_parser(parser, config=config)

def from_parser(parser, config=None):
    """ Fill a Config from an already populated ConfigParser. """
    config = config or Config()

    for name in parser.sections():
        section = parser[name]
        kind, _, network = name.partition(' ')
        network = network.strip()

        if name == MAIN_SECTION:
            _load_main(section, config)
        elif kind == PASSWORDS_SECTION:
            if not network:
                raise protocol.ConfigError('Passwords section without a network name: [{}]'.format(name))
            for nickname, password in section.items():
                config.set_password(network, nickname, password)
        elif kind == PROFILE_SECTION:
            config.add_profile(_load_profile(network, section))
        else:
            logger.warning('Ignoring unknown configuration section: [%s]', name)

    return config

def _load_main(section, config):
    for key in section:
        if key == 'mode':
            try:
                config.mode = protocol.normalize_mode(section[key])
            except ValueError as e:
                raise protocol.ConfigError(str(e)) from e
        elif key in FLAG_KEYS:
            setattr(config, FLAG_KEYS[key], _getboolean(section, key))
        else:
            logger.warning('Ignoring unknown option in [%s]: %s', section.name, key)

def _load_profile(network, section):
    if not network:
        raise protocol.ConfigError('Profile section without a network name: [{}]'.format(section.name))

    fields = {}
    for key in section:
        if key not in PROFILE_KEYS:
            logger.warning('Ignoring unknown option in [%s]: %s', section.name, key)
            continue
        if key == 'include_nick':
            fields[PROFILE_KEYS[key]] = _getboolean(section, key)
        else:
            fields[PROFILE_KEYS[key]] = section[key] or None

    return NetworkProfile(network_id=network, **fields)

def _getboolean(section, key):
    try:
        return section.getboolean(key)
    except ValueError as e:
        raise protocol.ConfigError('Invalid value for {} in [{}]: {}'.format(key, section.name, section[key])) from e
