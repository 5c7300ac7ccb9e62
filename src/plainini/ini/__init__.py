# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 15:20:08
# @Author : Kariko Lin

from .errors import (
    ErrorKind,
    IniError,
    FileError,
    MalformedSectionHeader,
    KeyOutsideSection,
    MalformedKeyValueLine,
    SectionNotFound,
    KeyNotFound,
    TypeConversion
)
from .model import IniSection, IniConfig
from .parser import IniParser, load
from .paths import PathResolver, executable_relative, working_dir_relative
