import nickserv
from .mocks import MockHost

# A network that asks for identification and acknowledges it.
MOCK_PROFILE = nickserv.NetworkProfile(
    network_id='MockNet',
    service_sender='NickServ!n@h',
    identify_request_pattern='please identify',
    service_nick='NickServ',
    identify_keyword='IDENTIFY',
    include_nick_in_message=False,
    success_pattern='you are now identified',
)
# A network whose NickServ never asks.
QUIET_PROFILE = nickserv.NetworkProfile(
    network_id='QuietNet',
    service_sender='NickServ!n@h',
    service_nick='NickServ',
    identify_keyword='IDENTIFY',
    success_pattern='you are now identified',
)


def with_services(mode=nickserv.BOTH, network='MockNet', **options):
    options.setdefault('profiles', { MOCK_PROFILE.network_id: MOCK_PROFILE, QUIET_PROFILE.network_id: QUIET_PROFILE })

    def inner(f):
        def run():
            host = MockHost(network=network)
            services = nickserv.Services(host, mode=mode, **options)

            try:
                return f(services=services, host=host)
            finally:
                services.close()

        run.__name__ = f.__name__
        return run
    return inner
