# -*- encoding: utf-8 -*-
# @File   : accessors.py
# @Time   : 2026/10/19 14:31:05
# @Author : Kariko Lin

"""Typed getters over a parsed INI document.

Literals are as strict as `strconv` in Go: no surrounding blanks,
no `_` separators, decimal integers only.
Nothing gets cached; every call parses the stored string again.
"""

import math
import re
import struct
from abc import ABCMeta, abstractmethod
from typing import Callable

from .errors import KeyNotFound, TypeConversion

INT_BITS = struct.calcsize('n') * 8

TRUE_LITERALS = frozenset(('1', 't', 'T', 'TRUE', 'true', 'True'))
FALSE_LITERALS = frozenset(('0', 'f', 'F', 'FALSE', 'false', 'False'))

INVALID_SYNTAX = 'invalid syntax'
OUT_OF_RANGE = 'value out of range'

_INT = re.compile(r'[+-]?[0-9]+')
_DEC_FLOAT = re.compile(
    r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_HEX_FLOAT = re.compile(
    r'[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+')
_SPECIAL_FLOAT = re.compile(r'[+-]?(?:inf|infinity)|nan', re.IGNORECASE)


def parse_bool(text: str) -> bool:
    if text in TRUE_LITERALS:
        return True
    if text in FALSE_LITERALS:
        return False
    raise ValueError(INVALID_SYNTAX)


def parse_int(text: str, bits: int = 64) -> int:
    if not _INT.fullmatch(text):
        raise ValueError(INVALID_SYNTAX)
    ret = int(text, 10)
    limit = 1 << (bits - 1)
    if not -limit <= ret < limit:
        raise ValueError(OUT_OF_RANGE)
    return ret


def parse_float(text: str) -> float:
    if _SPECIAL_FLOAT.fullmatch(text):
        return float(text)
    if _HEX_FLOAT.fullmatch(text):
        try:
            return float.fromhex(text)
        except OverflowError:
            raise ValueError(OUT_OF_RANGE) from None
    if not _DEC_FLOAT.fullmatch(text):
        raise ValueError(INVALID_SYNTAX)
    ret = float(text)
    if math.isinf(ret):
        raise ValueError(OUT_OF_RANGE)
    return ret


class TypedAccessors(metaclass=ABCMeta):
    """Mixin giving `get_string()` and friends to a document
    that can look up raw values."""

    @abstractmethod
    def _lookup(self, section: str, key: str) -> str:
        """Raw value of `key`, `''` if absent.

        Raises `SectionNotFound` for an unknown section.
        """
        raise NotImplementedError

    def get_string(self, section: str, key: str) -> str:
        """注意：值为空串的键与不存在的键等同，均抛出`KeyNotFound`。"""
        value = self._lookup(section, key)
        if value == '':
            raise KeyNotFound(section, key)
        return value

    def _convert[T](
        self, section: str, key: str,
        target: str, parser: Callable[[str], T]
    ) -> T:
        text = self.get_string(section, key)
        try:
            return parser(text)
        except ValueError as e:
            raise TypeConversion(section, key, target, text, str(e)) from e

    def get_bool(self, section: str, key: str) -> bool:
        return self._convert(section, key, 'bool', parse_bool)

    def get_int(self, section: str, key: str) -> int:
        """Integer bounded to the platform word, like a native `int`."""
        return self._convert(
            section, key, 'int', lambda x: parse_int(x, INT_BITS))

    def get_int64(self, section: str, key: str) -> int:
        return self._convert(section, key, 'int64', parse_int)

    def get_float64(self, section: str, key: str) -> float:
        return self._convert(section, key, 'float64', parse_float)
