## detection.py
# Recognizing NickServ identification requests and acknowledgements.
import logging

from . import protocol

__all__ = [ 'DetectionEngine' ]


class DetectionEngine:
    """
    Look at notices from services.
    A genuine identification request gets answered with an IDENTIFY; a success acknowledgement is announced
    to the listeners. Every message is judged on its own, nothing is remembered in between.
    """

    def __init__(self, host, registry, resolver, dispatcher):
        self.host = host
        self.registry = registry
        self.resolver = resolver
        self.dispatcher = dispatcher
        self.listeners = []
        self.logger = logging.getLogger(__name__)

    ## Listeners.

    def add_listener(self, callback):
        """ Call callback(network, nickname) whenever a successful identification is detected. """
        if callback not in self.listeners:
            self.listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self.listeners:
            self.listeners.remove(callback)

    def _identified(self, network, nickname):
        for callback in list(self.listeners):
            try:
                callback(network, nickname)
            except Exception:
                self.logger.exception('Failed to execute identification listener %r.', callback)

    ## Identification.

    def identify(self, nickname, password=None):
        """ Identify nickname on the current network, looking up the password if none is given. """
        network = self.host.network
        if not password:
            try:
                password = self.resolver.require(network, nickname)
            except protocol.CredentialNotFound as e:
                self.host.error(str(e))
                return False

        return self.dispatcher.send_identify(network, nickname, password)

    ## Message handlers.

    def on_identify_request(self, message):
        """ NOTICE: answer a genuine NickServ identification request. """
        network = self.host.network
        profile = self.registry.get(network)
        if not profile or not profile.is_identify_request(message.source, message.contents):
            return
        if not self.resolver.enabled:
            self.logger.debug('NickServ IDENTIFY request on %s ignored: no password sources enabled.', network)
            return

        self.logger.info('NickServ IDENTIFY request detected on %s.', network)
        self.identify(message.target or self.host.nickname)

    def on_identify_success(self, message):
        """ NOTICE: announce a successful identification. """
        network = self.host.network
        profile = self.registry.get(network)
        if not profile or not profile.is_identify_success(message.source, message.contents):
            return

        self.logger.info('NickServ IDENTIFY success notification detected on %s.', network)
        self._identified(network, message.target or self.host.nickname)
