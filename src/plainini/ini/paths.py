# -*- encoding: utf-8 -*-
# @File   : paths.py
# @Time   : 2026/10/19 14:44:52
# @Author : Kariko Lin

"""Where a bare file name like `config.ini` is looked up.

By default it sits beside the running program (`sys.argv[0]`),
NOT in the working directory. Pass `working_dir_relative` to the parser
to get the usual behaviour instead.
"""

import sys
from os.path import abspath, dirname, join, normpath
from typing import Protocol

__all__ = ['PathResolver', 'executable_relative', 'working_dir_relative']


class PathResolver(Protocol):
    def __call__(self, path: str, /) -> str: ...


def has_directory(path: str) -> bool:
    # `./config.ini` counts as bare as well.
    return dirname(normpath(path)) != ''


def program_dir() -> str:
    return dirname(abspath(sys.argv[0])) if sys.argv and sys.argv[0] else ''


def executable_relative(path: str) -> str:
    if has_directory(path):
        return path
    return join(program_dir(), normpath(path))


def working_dir_relative(path: str) -> str:
    return path
