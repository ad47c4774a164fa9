"""Command-line interface for nn."""


import argparse
import json
import logging
import sys
from terminaltables import AsciiTable
from normalnotes import __version__
from normalnotes.api import Notes, Error
from normalnotes.conf import ConfigAborted


def _edit(args, notes: Notes) -> int:
    notes.edit(getattr(args, 'date', None))
    return 0


def _delete(args, notes: Notes) -> int:
    date = args.date[0]
    if notes.repo.delete(date):
        print(f'Deleted note for {date}', file=sys.stderr)
    else:
        print(f'No note found for {date}', file=sys.stderr)
    return 0


def _list(args, notes: Notes) -> int:
    paths = notes.repo.entries()
    if args.json:
        print(json.dumps(paths))
    else:
        for path in paths:
            print(path)
    return 0


def _search(args, notes: Notes) -> int:
    hits = notes.repo.search(args.query[0])
    if args.json:
        print(json.dumps([h.as_json() for h in hits]))
    else:
        for hit in hits:
            print(f'{hit.path}:\n{hit.contents}')
    return 0


def _tags(args, notes: Notes) -> int:
    if args.counts:
        counts = notes.repo.tag_counts()
        data = [('Tag', 'Count')] + [(t, str(counts[t])) for t in sorted(counts)]
        table = AsciiTable(data)
        table.justify_columns[1] = 'right'
        print(table.table)
        return 0
    tags = sorted(notes.repo.tags())
    if args.json:
        print(json.dumps(tags))
    else:
        for tag in tags:
            print(tag)
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='nn', description='A normal notes tool. With no command, opens (or creates) today\'s note.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Print debug logging to stderr.')
    parser.set_defaults(func=_edit)

    subs = parser.add_subparsers(title='Commands')

    p_edit = subs.add_parser('edit', help='Open the note for a date in your editor, creating it if necessary.')
    p_edit.add_argument('date', nargs='?', help='Date of the note, like 2025-04-09. Defaults to today.')
    p_edit.set_defaults(func=_edit)

    p_del = subs.add_parser('delete', help='Delete a note.')
    p_del.add_argument('date', nargs=1, help='Date of the note, like 2025-04-09.')
    p_del.set_defaults(func=_delete)

    p_list = subs.add_parser('list', help='List all notes, sorted by filename.')
    p_list.add_argument('-j', '--json', action='store_true', help='Output as a JSON array of paths.')
    p_list.set_defaults(func=_list)

    p_search = subs.add_parser(
        'search',
        help='Search all notes for a string and print each matching note with its content. '
             'Matching is case-sensitive and the query is not treated as a pattern.')
    p_search.add_argument('query', nargs=1)
    p_search.add_argument('-j', '--json', action='store_true',
                          help='Output as JSON. The output is an array of objects with "path" and "contents".')
    p_search.set_defaults(func=_search)

    p_tags = subs.add_parser('tags', help='Show all tags (like #todo) used in notes.')
    p_tags_formats = p_tags.add_mutually_exclusive_group()
    p_tags_formats.add_argument('-j', '--json', action='store_true', help='Output as a JSON array.')
    p_tags_formats.add_argument('-c', '--counts', action='store_true',
                                help='Show a table of tags and the number of notes containing each.')
    p_tags.set_defaults(func=_tags)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format='%(levelname)s %(name)s: %(message)s')
    try:
        with Notes.for_user() as notes:
            return args.func(args, notes)
    except ConfigAborted:
        return 1
    except Error as e:
        print(f'nn: {e}', file=sys.stderr)
        return 1
