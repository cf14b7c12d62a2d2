## protocol.py
# NickServ protocol constants, errors and helpers.
import re

DEFAULT_SERVICE_NICK = 'NickServ'
DEFAULT_IDENTIFY_KEYWORD = 'IDENTIFY'
DEFAULT_DISPATCH_COMMAND = 'PRIVMSG'


## Modes.

MODE_AUTODETECT = 'autodetect'
MODE_NICK_CHANGE = 'nick-change'
MODE_BOTH = 'both'
MODE_DISABLED = 'disabled'
MODES = ( MODE_AUTODETECT, MODE_NICK_CHANGE, MODE_BOTH, MODE_DISABLED )


## Host events.

EVENT_NOTICE = 'notice'
EVENT_CONNECT = 'connect'
EVENT_NICK_CHANGE = 'nick_change'
EVENTS = ( EVENT_NOTICE, EVENT_CONNECT, EVENT_NICK_CHANGE )


## Errors.

class Error(Exception):
    """ Base class for all nickserv errors. """
    pass


class NoMatchingProfile(Error):
    def __init__(self, network):
        super().__init__('No NickServ profile for network: {}'.format(network))
        self.network = network


class CredentialNotFound(Error):
    def __init__(self, nickname):
        super().__init__('Cannot find a password for nickname {}'.format(nickname))
        self.nickname = nickname


class SendFailed(Error):
    """ The host transport refused an outbound message. """
    pass


class ConfigError(Error):
    pass


## Misc.

def identifierify(name):
    """ Clean up name so it works for a Python identifier. """
    name = name.lower()
    name = re.sub('[^a-z0-9]', '_', name)
    return name

def normalize_mode(mode):
    """ Turn a user-supplied mode into one of MODES. Raise ValueError for unknown modes. """
    if mode is None or mode is False:
        return MODE_DISABLED

    normalized = identifierify(str(mode).strip())
    for known in MODES:
        if identifierify(known) == normalized:
            return known
    raise ValueError('Unknown NickServ identify mode: {} (expected one of: {})'.format(mode, ', '.join(MODES)))
