#!/usr/bin/env python3
"""coolover: issue tracker CLI over REST API v2.

Modes:
    list-projects           List projects as "name - key"
    list-issues             List issues of a project
    show-issue              Show a single issue
    download-attachments    Download attachments of a project's issues
"""

import argparse
import sys
from collections import namedtuple

from coolover.attachments import cmd_download_attachments
from coolover.config import setup
from coolover.errors import CooloverError, UsageError
from coolover.issues import cmd_list_issues, cmd_show_issue
from coolover.output import emit_error, set_json_mode
from coolover.projects import cmd_list_projects

PROG = 'coolover'

Mode = namedtuple('Mode', ['handler', 'args'])

MODES = {
    'list-projects': Mode(cmd_list_projects, ()),
    'list-issues': Mode(cmd_list_issues, ('project', 'order_by', 'max_results')),
    'show-issue': Mode(cmd_show_issue, ('issue_key',)),
    'download-attachments': Mode(cmd_download_attachments,
                                 ('project', 'order_by', 'max_results', 'dir')),
}


class Parser(argparse.ArgumentParser):
    """ArgumentParser that reports errors as UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser():
    parser = Parser(
        prog=PROG,
        usage=f'{PROG} <mode> [options]',
        description='Issue tracker CLI over REST API v2',
        epilog='Modes:\n  ' + ' | '.join(MODES),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument('mode', nargs='?', choices=list(MODES), metavar='mode',
                        help='One of the modes listed below')
    parser.add_argument('-p', '--project', metavar='<project>', help='Project key')
    parser.add_argument('-o', '--order-by', metavar='<field>', default='created',
                        help='Order by field (default: created)')
    parser.add_argument('-m', '--max-results', metavar='<number>', type=int, default=10,
                        help='Maximum number of results (default: 10)')
    parser.add_argument('-i', '--issue-key', metavar='<issue-key>', help='Issue key')
    parser.add_argument('-d', '--dir', metavar='<dir>', default='.',
                        help='Attachment download directory (default: .)')
    parser.add_argument('--json', action='store_true', dest='json_output',
                        help='Output as JSON for programmatic parsing')
    return parser


def usage(parser, error=None):
    text = parser.format_help()
    if error:
        text += f'\n{error}\n'
    return text


def resolve(parser, argv):
    """Parse argv and return (mode, keyword arguments for its handler, namespace)."""
    if not argv:
        raise UsageError('')
    args = parser.parse_args(argv)
    if args.mode is None:
        raise UsageError('No mode given')
    mode = MODES[args.mode]
    missing = [name for name in mode.args if getattr(args, name) is None]
    if missing:
        options = ', '.join('--' + name.replace('_', '-') for name in missing)
        raise UsageError(f'{args.mode} requires {options}')
    return mode, {name: getattr(args, name) for name in mode.args}, args


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    try:
        mode, kwargs, args = resolve(parser, argv)
    except UsageError as e:
        print(usage(parser, str(e)))
        sys.exit(2)

    if args.json_output:
        set_json_mode(True)
    try:
        session, config = setup()
        mode.handler(session, config, **kwargs)
    except (CooloverError, OSError) as e:
        emit_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == '__main__':
    main()
