## run.py
# Identify once and print what would be sent.
import sys
from . import _args


def main(argv=None):
    services, args = _args.services_from_args('nickserv-identify', description='Print the NickServ identify command for a network.', argv=argv)
    if not services.identify(args.nickname, args.password):
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
