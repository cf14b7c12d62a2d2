## services.py
# Automatic NickServ identification for an IRC client.
import logging

from . import protocol
from .config import Config
from .credentials import CredentialResolver
from .detection import DetectionEngine
from .dispatch import IdentifyDispatcher
from .profiles import ProfileRegistry

__all__ = [ 'Services' ]


class Services:
    """
    NickServ services for a single host.
    The mode decides which handlers are attached to the host:

      autodetect   answer identification requests from NickServ.
      nick-change  identify right after connecting and after every nickname change.
      both         answer requests, and identify on connect/nick change on networks that never send them.
      disabled     do nothing.

    Success notifications are tracked in every mode but disabled, and in disabled too
    while config.always_detect_success is set.
    """

    def __init__(self, host, config=None, mode=None, **kwargs):
        """ Attach services to host. Extra keyword arguments are passed on to Config. """
        self.host = host
        self.config = config or Config(**kwargs)
        self.logger = logging.getLogger(__name__)
        if config and kwargs:
            self.logger.warning('Unused arguments: %s', ', '.join(kwargs.keys()))

        self.registry = ProfileRegistry(self.config.profiles)
        self.resolver = CredentialResolver(host, self.config)
        self.dispatcher = IdentifyDispatcher(host, self.registry)
        self.detection = DetectionEngine(host, self.registry, self.resolver, self.dispatcher)
        self.detection.add_listener(self.on_identified)

        self._mode = protocol.MODE_DISABLED
        self._subscriptions = set()
        self.set_mode(mode if mode is not None else self.config.mode)

    ## Modes.

    @property
    def mode(self):
        return self._mode

    @mode.setter
    def mode(self, value):
        self.set_mode(value)

    def set_mode(self, mode):
        """ Switch to mode, detaching handlers the new mode doesn't need before attaching the ones it does. """
        mode = protocol.normalize_mode(mode)
        wanted = self._subscriptions_for(mode)

        for event, handler in _ordered(self._subscriptions - wanted):
            self.host.remove_handler(event, handler)
            self._subscriptions.discard((event, handler))
        for event, handler in _ordered(wanted - self._subscriptions):
            self.host.add_handler(event, handler)
            self._subscriptions.add((event, handler))

        if mode != self._mode:
            self.logger.debug('NickServ identify mode: %s -> %s', self._mode, mode)
        self._mode = mode

    def close(self):
        """ Detach everything from the host. """
        for event, handler in _ordered(self._subscriptions):
            self.host.remove_handler(event, handler)
        self._subscriptions.clear()
        self._mode = protocol.MODE_DISABLED

    @property
    def subscriptions(self):
        """ The (event, handler) pairs currently attached to the host. """
        return frozenset(self._subscriptions)

    def _subscriptions_for(self, mode):
        subscriptions = set()

        if mode in (protocol.MODE_AUTODETECT, protocol.MODE_BOTH):
            subscriptions.add((protocol.EVENT_NOTICE, self._handle_identify_request))
        if mode == protocol.MODE_NICK_CHANGE:
            subscriptions.add((protocol.EVENT_CONNECT, self._handle_connect))
            subscriptions.add((protocol.EVENT_NICK_CHANGE, self._handle_nick_change))
        if mode == protocol.MODE_BOTH:
            subscriptions.add((protocol.EVENT_CONNECT, self._handle_connect_fallback))
            subscriptions.add((protocol.EVENT_NICK_CHANGE, self._handle_nick_change_fallback))
        # Gated per notice, see _handle_identify_success.
        subscriptions.add((protocol.EVENT_NOTICE, self._handle_identify_success))

        return subscriptions

    ## API.

    def identify(self, nickname=None, password=None):
        """
        Identify to NickServ right now.
        Uses the current nickname if none is given and looks up the password if none is given.
        Returns whether the identify message was sent; a missing password is reported to the operator.
        """
        if not nickname:
            nickname = self.host.nickname
        self._sync_profiles()
        return self.detection.identify(nickname, password)

    def add_listener(self, callback):
        """ Call callback(network, nickname) whenever NickServ acknowledges an identification. """
        self.detection.add_listener(callback)

    def remove_listener(self, callback):
        self.detection.remove_listener(callback)

    ## Overloadable callbacks.

    def on_identified(self, network, nickname):
        """ Callback called when NickServ acknowledged our identification. """
        pass

    ## Host event handlers.

    def _handle_identify_request(self, message):
        self._sync_profiles()
        self.detection.on_identify_request(message)

    def _handle_identify_success(self, message):
        if self._mode == protocol.MODE_DISABLED and not self.config.always_detect_success:
            return
        self._sync_profiles()
        self.detection.on_identify_success(message)

    def _handle_connect(self, network, nickname):
        self._identify_directly(nickname)

    def _handle_nick_change(self, new, old):
        self._identify_directly(new)

    def _handle_connect_fallback(self, network, nickname):
        if self._network_sends_requests(network):
            return
        self._identify_directly(nickname)

    def _handle_nick_change_fallback(self, new, old):
        if self._network_sends_requests(self.host.network):
            return
        self._identify_directly(new)

    ## Internal.

    def _identify_directly(self, nickname):
        if not self.resolver.enabled:
            return
        self.identify(nickname)

    def _network_sends_requests(self, network):
        """ Whether network announces identification requests we can pick up. """
        self._sync_profiles()
        profile = self.registry.get(network)
        return bool(profile and profile.identify_request_pattern)

    def _sync_profiles(self):
        """ Rebuild the registry if the configured profile overrides changed. """
        overrides = tuple(self.config.profiles.values())
        if overrides != self.registry.overrides:
            self.logger.debug('NickServ profile overrides changed, rebuilding registry.')
            self.registry.replace(overrides)


def _ordered(subscriptions):
    return sorted(subscriptions, key=lambda pair: (pair[0], pair[1].__name__))
