## profiles.py
# List known network profiles.
import sys

from nickserv.profiles import ProfileRegistry
from . import _args

COLUMNS = '{network:<12} {service:<30} {keyword:<9} {nick:<4} {request:<3} {success:<3}'


def main(argv=None, output=None):
    parser = _args.create_parser('nickserv-profiles', description='List the NickServ profiles of all known networks.')
    args = parser.parse_args(argv)
    _args.setup_logging(args)
    output = output or sys.stdout

    config = _args.config_from_args(args)
    registry = ProfileRegistry(config.profiles)

    print(COLUMNS.format(network='NETWORK', service='SERVICE', keyword='KEYWORD', nick='NICK', request='REQ', success='OK'), file=output)
    for profile in registry:
        print(COLUMNS.format(
            network=profile.network_id,
            service=profile.service_nick or '-',
            keyword=profile.identify_keyword or '-',
            nick='yes' if profile.include_nick_in_message else 'no',
            request='yes' if profile.identify_request_pattern else 'no',
            success='yes' if profile.success_pattern else 'no'
        ), file=output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
