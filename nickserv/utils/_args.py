## _args.py
# Common argument parsing code.
import argparse
import getpass
import logging
import os.path as path

import nickserv
from nickserv import config as configuration
from .console import ConsoleHost

DEFAULT_NETRC = path.join('~', '.netrc')


def create_parser(name, description):
    parser = argparse.ArgumentParser(name, description=description, add_help=False,
        epilog='This program is part of {package}.'.format(package=nickserv.__name__))

    meta = parser.add_argument_group('Meta')
    meta.add_argument('-h', '--help', action='help', help='What you are reading right now.')
    meta.add_argument('-v', '--version', action='version', version='{package}/%(prog)s {ver}'.format(package=nickserv.__name__, ver=nickserv.__version__), help='Dump version number.')
    meta.add_argument('-V', '--verbose', help='Be verbose in warnings and errors.', action='store_true', default=False)
    meta.add_argument('-d', '--debug', help='Show debug output.', action='store_true', default=False)

    conf = parser.add_argument_group('Configuration')
    conf.add_argument('-c', '--config', help='Configuration file with passwords and network profiles.', metavar='FILE')
    return parser

def setup_logging(args):
    if args.debug:
        log_level = logging.DEBUG
    elif args.verbose:
        log_level = logging.INFO
    else:
        log_level = logging.ERROR

    logging.basicConfig(level=log_level, format='!! %(levelname)s: %(message)s')

def config_from_args(args):
    """ Load the configuration file, if any. """
    if args.config:
        return configuration.load(path.expanduser(args.config))
    return nickserv.Config()

def services_from_args(name, description, argv=None, cls=nickserv.Services):
    parser = create_parser(name, description)

    conn = parser.add_argument_group('Connection')
    conn.add_argument('network', help='The network to identify on, as named in the profile table.', metavar='NETWORK')
    conn.add_argument('-s', '--server', help='Server hostname, used for secret store lookups.', metavar='HOST')
    conn.add_argument('-p', '--port', help='Server port. (default: 6667)', type=int, metavar='PORT')
    conn.add_argument('-n', '--nickname', help='Nickname to identify. (default: your user name)', metavar='NICK')

    auth = parser.add_argument_group('Authentication')
    auth.add_argument('-P', '--password', help='NickServ password. (default: looked up)', metavar='PASS')
    auth.add_argument('--netrc', help='Look up passwords in a netrc file. (default file: {})'.format(DEFAULT_NETRC), nargs='?', const=DEFAULT_NETRC, metavar='FILE')
    auth.add_argument('--no-prompt', help='Never ask for a password.', action='store_true', default=False)

    args = parser.parse_args(argv)
    setup_logging(args)

    config = config_from_args(args)
    if args.netrc:
        config.use_secret_store = True
    if args.no_prompt:
        config.prompt_for_password = False

    host = ConsoleHost(args.network, args.nickname or getpass.getuser(), hostname=args.server, port=args.port,
        netrc_file=path.expanduser(args.netrc) if args.netrc else None)
    # Only identify when asked to.
    services = cls(host, config=config, mode=nickserv.DISABLED)

    return services, args
