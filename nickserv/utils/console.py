## console.py
# Host that talks to the terminal instead of an IRC server.
import getpass
import netrc
import sys

from .. import protocol
from ..host import Host

__all__ = [ 'ConsoleHost' ]

DEFAULT_PORT = 6667


class ConsoleHost(Host):
    """
    Prints outgoing messages as raw lines, prompts on the terminal and reads secrets from a netrc file.
    Useful for checking what would be sent to a network without connecting to it.
    """

    def __init__(self, network, nickname, hostname=None, port=None, netrc_file=None, output=None):
        self._network = network
        self._nickname = nickname
        self.hostname = hostname
        self.port = port or DEFAULT_PORT
        self.netrc_file = netrc_file
        self.output = output or sys.stdout
        self.handlers = {}

    @property
    def network(self):
        return self._network

    @property
    def nickname(self):
        return self._nickname

    @nickname.setter
    def nickname(self, value):
        old, self._nickname = self._nickname, value
        self.emit(protocol.EVENT_NICK_CHANGE, value, old)

    @property
    def server(self):
        return self.hostname, self.port

    ## Primitives.

    def send(self, command, body):
        print('{command} {body}'.format(command=command, body=body), file=self.output)
        return True

    def query_secret(self, hostname, port, user):
        """ Look up user@hostname in the netrc file. netrc has no notion of ports, so port is ignored. """
        if not self.netrc_file or not hostname:
            return None

        try:
            entry = netrc.netrc(self.netrc_file).authenticators(hostname)
        except FileNotFoundError:
            return None
        except netrc.NetrcParseError as e:
            self.error('Could not read {}: {}'.format(self.netrc_file, e))
            return None
        if not entry:
            return None

        login, _, password = entry
        if login and login != user:
            return None
        return { 'secret': password }

    def prompt(self, text):
        try:
            return getpass.getpass(text)
        except (EOFError, KeyboardInterrupt):
            return None

    def error(self, text):
        print('!! {}'.format(text), file=sys.stderr)

    ## Events.

    def add_handler(self, event, handler):
        self.handlers.setdefault(event, []).append(handler)

    def remove_handler(self, event, handler):
        handlers = self.handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event, *args):
        """ Deliver event to every handler registered for it. """
        for handler in list(self.handlers.get(event, [])):
            handler(*args)
