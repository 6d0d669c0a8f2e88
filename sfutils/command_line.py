import argparse
import logging
import sys

from colorama import Fore, Style, init

from .__version__ import __version__
from .json_items import ItemFormatError, load_items_file
from .media_type import extract_quality, match, sort
from .structures import bare_string

parser = argparse.ArgumentParser(description='Rank and match HTTP media types given as structured field items in '
                                             'JSON (use - to read from stdin)')

parser.add_argument('-v', '--verbose', default=False, action='store_true',
                    help='log each comparison made')

parser.add_argument('-V', '--version', default=False, action='version', version=f'%(prog)s {__version__}')

subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
subparsers.required = True

sort_parser = subparsers.add_parser('sort', help='rank media types by preference')
sort_parser.add_argument('items', metavar='ITEMS',
                         help='JSON file holding a list of media type items, e.g. a parsed Accept header')

match_parser = subparsers.add_parser('match', help='match a requested media type against allowed media types')
match_parser.add_argument('requested', metavar='REQUESTED',
                          help='JSON file holding the requested media type item')
match_parser.add_argument('allowed', metavar='ALLOWED',
                          help='JSON file holding one or more allowed media type items')


def main(argv=None):
    init(autoreset=True)
    args = parser.parse_args(argv)
    configure_logging(get_log_level(args))
    try:
        if args.command == 'sort':
            return sort_command(read_items(args.items))
        requested = read_items(args.requested)
        if len(requested) != 1:
            raise ItemFormatError(f'expected a single requested item, got {len(requested)}')
        return match_command(requested[0], read_items(args.allowed))
    except (ItemFormatError, OSError) as e:
        print(Fore.RED + str(e), file=sys.stderr)
        return 2


def get_log_level(args):
    if args.verbose:
        return logging.DEBUG
    return logging.WARNING


def configure_logging(level):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(name)s %(levelname)s %(message)s'))
    log = logging.getLogger('sfutils')
    log.handlers = [handler]
    log.setLevel(level)
    log.propagate = False


def read_items(filename):
    if filename == '-':
        return load_items_file(sys.stdin)
    return load_items_file(filename)


def format_item(item):
    value, params = item
    return bare_string(value) + ''.join(f';{name}={bare_string(param)}' for name, param in params.items())


def sort_command(items):
    for rank, item in enumerate(sort(items), 1):
        quality = extract_quality(item[1].get('q'))
        color = Fore.GREEN if quality else Fore.RED
        print(f'{Style.BRIGHT}{rank:>3}. {Style.NORMAL}{format_item(item)} {color}(q={quality / 1000:g})')
    return 0


def match_command(requested, allowed):
    success = False
    for item in allowed:
        result = match(requested, item)
        if result is True:
            print(f'{format_item(item)}: ' + Fore.GREEN + 'MATCH')
            success = True
        elif result:
            mismatched = ', '.join(f'{name}={bare_string(value)}' for name, value in result.items())
            print(f'{format_item(item)}: ' + Fore.YELLOW + f'MISMATCH {mismatched}')
        else:
            print(f'{format_item(item)}: ' + Fore.RED + 'NO MATCH')
    return int(not success)


if __name__ == '__main__':
    sys.exit(main())
