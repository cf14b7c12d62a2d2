## credentials.py
# Password lookup for NickServ identification.
import logging

from . import protocol

__all__ = [ 'CredentialResolver' ]


PROMPT = 'NickServ password for {nickname} on {network} (RET to cancel): '


class CredentialResolver:
    """
    Find the NickServ password for a nickname.
    Sources are tried in order, skipping disabled ones, and the first non-empty secret wins:
    the configured passwords, the host's secret store, and finally an interactive prompt.
    """

    def __init__(self, host, config):
        self.host = host
        self.config = config
        self.logger = logging.getLogger(__name__)

    @property
    def enabled(self):
        """ Whether any source could possibly yield a password. """
        return bool(self.config.use_passwords or self.config.use_secret_store or self.config.prompt_for_password)

    def resolve(self, network, nickname):
        """ Return the password for nickname on network, or None if no source has one. """
        for name, source in self._sources():
            secret = source(network, nickname)
            if secret:
                self.logger.debug('Found NickServ password for %s on %s in %s.', nickname, network, name)
                return secret
        return None

    def require(self, network, nickname):
        """ Like resolve(), but raise CredentialNotFound instead of returning None. """
        secret = self.resolve(network, nickname)
        if not secret:
            raise protocol.CredentialNotFound(nickname)
        return secret

    def _sources(self):
        # Flags are checked lazily: a source is skipped entirely when disabled.
        if self.config.use_passwords:
            yield 'configuration', self._from_config
        if self.config.use_secret_store:
            yield 'secret store', self._from_secret_store
        if self.config.prompt_for_password:
            yield 'prompt', self._from_prompt

    ## Sources.

    def _from_config(self, network, nickname):
        return self.config.password(network, nickname) or None

    def _from_secret_store(self, network, nickname):
        hostname, port = self.host.server
        record = self.host.query_secret(hostname, port, nickname)
        if not record:
            return None
        return resolve_deferred(record.get('secret')) or None

    def _from_prompt(self, network, nickname):
        return self.host.prompt(PROMPT.format(nickname=nickname, network=network)) or None


def resolve_deferred(secret):
    """ Secret stores may hand out a callable instead of the secret itself. Call it to get the actual value. """
    if callable(secret):
        secret = secret()
    return secret
