## host.py
# Interface to the IRC client NickServ services are attached to.
from abc import abstractmethod

__all__ = [ 'Message', 'Host' ]


class Message:
    """ An inbound IRC message, already parsed by the host. """

    def __init__(self, source, command, params=(), contents=None):
        self.source = source
        self.command = command
        self.params = tuple(params)
        self.contents = contents

    @property
    def target(self):
        """ Whoever the message was addressed to, usually our own nickname. """
        return self.params[0] if self.params else None

    def __repr__(self):
        return '<Message {source} {command} {params} :{contents}>'.format(
            source=self.source, command=self.command, params=' '.join(self.params), contents=self.contents)


class Host:
    """
    Abstract IRC client. Hosts must inherit from this class.
    A host owns the connection, parses messages and delivers the `notice`, `connect` and `nick_change` events
    to handlers registered through add_handler().
    """
    # Whether the client throws away its away status when it sends a message.
    auto_discard_away = False

    ## State.

    @property
    @abstractmethod
    def network(self):
        """ Identifier of the network we are connected to, or None. """
        raise NotImplementedError()

    @property
    @abstractmethod
    def nickname(self):
        """ Our current nickname. """
        raise NotImplementedError()

    @property
    def server(self):
        """ (hostname, port) of the server we are connected to. """
        return None, None

    ## Primitives.

    @abstractmethod
    def send(self, command, body):
        """ Send a message. Return True if the transport accepted it, False (or raise SendFailed) if it did not. """
        raise NotImplementedError()

    def query_secret(self, hostname, port, user):
        """ Look up a secret record for the given server and user. Return a mapping with a 'secret' key, or None. """
        return None

    def prompt(self, text):
        """ Ask the operator for a secret with masked input. Return None if cancelled. """
        return None

    @abstractmethod
    def error(self, text):
        """ Show an error to the operator. Must not raise. """
        raise NotImplementedError()

    ## Events.

    @abstractmethod
    def add_handler(self, event, handler):
        raise NotImplementedError()

    @abstractmethod
    def remove_handler(self, event, handler):
        raise NotImplementedError()
