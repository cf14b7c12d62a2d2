from pytest import mark

import nickserv
from .fixtures import with_services, MOCK_PROFILE
from .mocks import MockHost


@mark.meta
@with_services()
def test_fixtures_with_services(services, host):
    assert isinstance(host, MockHost)
    assert isinstance(services, nickserv.Services)
    assert services.host is host
    assert services.mode == nickserv.BOTH


@mark.meta
@with_services(mode=nickserv.AUTODETECT)
def test_fixtures_with_services_mode(services, host):
    assert services.mode == nickserv.AUTODETECT


@mark.meta
@with_services(network='OtherNet', use_secret_store=True)
def test_fixtures_with_services_options(services, host):
    assert host.network == 'OtherNet'
    assert services.config.use_secret_store


@mark.meta
@with_services()
def test_fixtures_with_services_profiles(services, host):
    assert services.registry.lookup('MockNet') is MOCK_PROFILE
    assert 'QuietNet' in services.registry
