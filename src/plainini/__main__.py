# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/19 16:05:42
# @Author : Kariko Lin

"""Small command line front end: list sections, show one, or fetch a value.

    plainini config.ini
    plainini config.ini --section users
    plainini config.ini --get database port --type int
    plainini config.ini --yaml
"""

import argparse
import logging
import sys
from typing import Sequence

import yaml

from .ini import IniConfig, IniError, load, working_dir_relative

GETTERS = {
    'string': IniConfig.get_string,
    'bool': IniConfig.get_bool,
    'int': IniConfig.get_int,
    'int64': IniConfig.get_int64,
    'float64': IniConfig.get_float64,
}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='plainini',
        description='Read a plain INI file and print what is inside.')
    parser.add_argument(
        'path',
        help='INI file. A bare file name is looked up beside this program '
             'unless --cwd is given.')
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        '-s', '--section', metavar='NAME',
        help='Print the key/value pairs of a section.')
    group.add_argument(
        '-g', '--get', nargs=2, metavar=('SECTION', 'KEY'),
        help='Print a single value.')
    group.add_argument(
        '--yaml', action='store_true',
        help='Dump the whole document as YAML.')
    parser.add_argument(
        '-t', '--type', choices=GETTERS, default='string',
        help='How to convert the value of --get (default: string).')
    parser.add_argument(
        '--cwd', action='store_true',
        help='Resolve bare file names against the working directory.')
    parser.add_argument('--encoding', help='Text encoding of the file.')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> None:
    kwargs = {'encoding': args.encoding}
    if args.cwd:
        kwargs['resolver'] = working_dir_relative
    config = load(args.path, **kwargs)

    if args.get:
        section, key = args.get
        print(GETTERS[args.type](config, section, key))
    elif args.section:
        section = config.get_section(args.section)
        print(f"Section '{section.name}':")
        for k, v in section.items():
            print(f'{k}: {v}')
    elif args.yaml:
        yaml.safe_dump(
            config.to_dict(), sys.stdout,
            allow_unicode=True, sort_keys=False)
    else:
        print('Sections:')
        for name in config.get_section_names():
            print(f' - {name}')


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(asctime)s] %(levelname)s: %(message)s')
    try:
        run(args)
    except IniError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
