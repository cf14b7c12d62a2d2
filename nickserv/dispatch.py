## dispatch.py
# Sending IDENTIFY commands to NickServ.
import contextlib
import logging

from . import protocol

__all__ = [ 'IdentifyDispatcher', 'construct_identify' ]


class IdentifyDispatcher:
    """ Build and send the identify message for a network. """

    def __init__(self, host, registry):
        self.host = host
        self.registry = registry
        self.logger = logging.getLogger(__name__)

    def send_identify(self, network, nickname, password):
        """ Identify nickname with password. Return True if the host sent the message, False if it refused. """
        profile = self.registry.get(network)
        command, body = construct_identify(profile, nickname, password)

        self.logger.info('Sending NickServ %s for %s on %s.', command, nickname, network)
        with away_kept(self.host):
            try:
                sent = self.host.send(command, body)
            except protocol.SendFailed as e:
                self.logger.error('Could not send NickServ identification for %s: %s', nickname, e)
                return False

        if sent is False:
            self.logger.error('Could not send NickServ identification for %s.', nickname)
            return False
        return True


@contextlib.contextmanager
def away_kept(host):
    """ Stop the host from dropping its away status while we talk to services. """
    previous = host.auto_discard_away
    host.auto_discard_away = False
    try:
        yield
    finally:
        host.auto_discard_away = previous

def construct_identify(profile, nickname, password):
    """ Return (command, body) for identifying nickname with password according to profile. """
    service = protocol.DEFAULT_SERVICE_NICK
    keyword = protocol.DEFAULT_IDENTIFY_KEYWORD
    command = protocol.DEFAULT_DISPATCH_COMMAND
    nick = ''

    if profile:
        service = profile.service_nick or service
        keyword = profile.identify_keyword or keyword
        command = profile.dispatch_command or command
        if profile.include_nick_in_message:
            nick = nickname + ' '

    return command, '{service} {keyword} {nick}{password}'.format(
        service=service, keyword=keyword, nick=nick, password=password)
