## profiles.py
# Per-network NickServ profiles.
import collections
import collections.abc
import functools
import logging
import re
import types

from . import protocol

__all__ = [ 'NetworkProfile', 'ProfileRegistry', 'DEFAULT_PROFILES' ]

logger = logging.getLogger(__name__)


FIELDS = (
    'network_id',
    'service_sender',
    'identify_request_pattern',
    'service_nick',
    'identify_keyword',
    'include_nick_in_message',
    'dispatch_command',
    'success_pattern',
)


class NetworkProfile(collections.namedtuple('NetworkProfile', FIELDS, defaults=(None, None, None, None, False, None, None))):
    """
    How the NickServ of a single network behaves.
    A profile without service_sender never sends identify requests; one without success_pattern can not be
    checked for successful identification.
    """
    __slots__ = ()

    def is_identify_request(self, sender, text):
        """ Whether a notice is a genuine identification request. """
        return self._is_service_message(sender, text, self.identify_request_pattern)

    def is_identify_success(self, sender, text):
        """ Whether a notice acknowledges a successful identification. """
        return self._is_service_message(sender, text, self.success_pattern)

    def _is_service_message(self, sender, text, pattern):
        if not self.service_sender or sender != self.service_sender:
            return False
        if not pattern or text is None:
            return False

        regex = compile_pattern(pattern)
        return regex is not None and regex.search(text) is not None


@functools.lru_cache(maxsize=None)
def compile_pattern(pattern):
    """ Compile a profile pattern. Broken patterns yield None so their detector stays silent. """
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning('Ignoring invalid NickServ pattern %r: %s', pattern, e)
        return None


## Defaults.

DEFAULT_PROFILES = (
    NetworkProfile('Ars', None, None, 'Census', 'IDENTIFY'),
    NetworkProfile('Austnet',
        'NickOP!service@austnet.org',
        r'/msg\sNickOP@austnet.org\sidentify\s<password>',
        'nickop@austnet.org'),
    NetworkProfile('Azzurra',
        'NickServ!service@azzurra.org',
        '\x02/ns\\sIDENTIFY\\spassword\x02',
        'NickServ', 'IDENTIFY'),
    NetworkProfile('BitlBee', None, None, '&bitlbee', 'identify'),
    NetworkProfile('BRASnet',
        'NickServ!services@brasnet.org',
        '\x02/NickServ\\sIDENTIFY\\s\x1fsenha\x1f\x02',
        'NickServ', 'IDENTIFY'),
    NetworkProfile('DALnet',
        'NickServ!service@dal.net',
        r'/msg\sNickServ@services.dal.net\sIDENTIFY\s<password>',
        'NickServ@services.dal.net', 'IDENTIFY'),
    NetworkProfile('freenode',
        'NickServ!NickServ@services.',
        r'This\snickname\sis\sregistered.\sPlease\schoose',
        'NickServ', 'IDENTIFY', False, None,
        r'You\sare\snow\sidentified\sfor\s'),
    NetworkProfile('Libera.Chat',
        'NickServ!NickServ@services.libera.chat',
        r'This\snickname\sis\sregistered.\sPlease\schoose',
        'NickServ', 'IDENTIFY', False, None,
        r'You\sare\snow\sidentified\sfor\s'),
    NetworkProfile('GalaxyNet',
        'NS!nickserv@galaxynet.org',
        r'Please\schange\snicks\sor\sauthenticate.',
        'NS@services.galaxynet.org', 'AUTH', True),
    NetworkProfile('GRnet',
        'NickServ!service@irc.gr',
        r'This\snickname\sis\sregistered\sand\sprotected.',
        'NickServ', 'IDENTIFY', False, None,
        r'Password\saccepted\s-\syou\sare\snow\srecognized.'),
    NetworkProfile('iip',
        'Trent@anon.iip',
        r'type\s/squery\sTrent\sidentify\s<password>',
        'Trent@anon.iip', 'IDENTIFY', False, 'SQUERY'),
    NetworkProfile('OFTC',
        'NickServ!services@services.oftc.net',
        None,
        'NickServ', 'IDENTIFY', False, None,
        r'You\sare\ssuccessfully\sidentified\sas\s'),
    NetworkProfile('Rizon',
        'NickServ!service@rizon.net',
        r'This\snickname\sis\sregistered\sand\sprotected.',
        'NickServ', 'IDENTIFY', False, None,
        r'Password\saccepted\s-\syou\sare\snow\srecognized.'),
    NetworkProfile('QuakeNet', None, None, 'Q@CServe.quakenet.org', 'auth', True),
    NetworkProfile('SlashNET',
        'NickServ!services@services.slashnet.org',
        '/msg\\sNickServ\\sIDENTIFY\\s\x1fpassword',
        'NickServ@services.slashnet.org', 'IDENTIFY'),
)


## Registry.

class ProfileRegistry:
    """
    Read-only table of network profiles: the built-in defaults merged with operator overrides.
    Operator entries replace built-in entries with the same network_id.
    """

    def __init__(self, overrides=(), defaults=DEFAULT_PROFILES):
        self._defaults = build_table(defaults)
        self._overrides = ()
        self._profiles = types.MappingProxyType(dict(self._defaults))
        self.replace(overrides)

    def replace(self, overrides):
        """ Replace the whole table by the defaults merged with the given overrides. """
        if isinstance(overrides, collections.abc.Mapping):
            overrides = overrides.values()
        overrides = tuple(overrides)

        table = dict(self._defaults)
        table.update(build_table(overrides))
        # Swap in one go: readers only ever see the old or the new table.
        self._profiles = types.MappingProxyType(table)
        self._overrides = overrides

    @property
    def overrides(self):
        """ The operator overrides the current table was built from. """
        return self._overrides

    def lookup(self, network):
        """ Return the profile for network. Raise NoMatchingProfile if there is none. """
        try:
            return self._profiles[network]
        except KeyError:
            raise protocol.NoMatchingProfile(network) from None

    def get(self, network, default=None):
        """ Return the profile for network, or default. """
        if network is None:
            return default
        return self._profiles.get(network, default)

    def __contains__(self, network):
        return network in self._profiles

    def __iter__(self):
        return iter(self._profiles.values())

    def __len__(self):
        return len(self._profiles)


def build_table(profiles):
    """ Index profiles by network_id. Raise ValueError on duplicate identifiers. """
    table = collections.OrderedDict()
    for profile in profiles:
        if profile.network_id in table:
            raise ValueError('Duplicate NickServ profile for network: {}'.format(profile.network_id))
        table[profile.network_id] = profile
    return table
