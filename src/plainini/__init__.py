# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 13:45:51
# @Author : Kariko Lin

import logging

from .ini import (
    ErrorKind,
    IniError,
    FileError,
    MalformedSectionHeader,
    KeyOutsideSection,
    MalformedKeyValueLine,
    SectionNotFound,
    KeyNotFound,
    TypeConversion,
    IniSection,
    IniConfig,
    IniParser,
    load,
    executable_relative,
    working_dir_relative
)

__all__ = [
    'IniConfig', 'IniSection', 'IniParser', 'load',
    'executable_relative', 'working_dir_relative',
    'ErrorKind', 'IniError', 'FileError',
    'MalformedSectionHeader', 'KeyOutsideSection', 'MalformedKeyValueLine',
    'SectionNotFound', 'KeyNotFound', 'TypeConversion'
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
