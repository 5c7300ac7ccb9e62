# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 14:10:37
# @Author : Kariko Lin

"""
Plain INI structure: an ordered list of sections,
each one a `str: str` dict of its entries.

Duplicated section headers are kept as separate sections.
Lookup by name always answers the first one.
"""

import logging
from collections.abc import Mapping
from typing import Iterator

from .accessors import TypedAccessors
from .errors import KeyOutsideSection, SectionNotFound

__all__ = ['IniSection', 'IniConfig']

logger = logging.getLogger(__name__)


class IniSection(Mapping[str, str]):
    """INI 小节。对使用者只读，键值对由解析器写入。

    键和值都原样保存，不做任何裁剪或类型转换。
    """
    def __init__(self, name: str) -> None:
        self._name = name
        self._data: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def _set(self, key: str, value: str) -> None:
        # last occurrence wins.
        self._data[key] = value

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniConfig(TypedAccessors):
    """INI 文件表示。

    Sections are kept in the order their headers first appeared.
    Only the parser should call `add_section()` and `set_key()`;
    everything else is read only.
    """
    def __init__(self, file_name: str = '') -> None:
        self.file_name = file_name
        self._sections: list[IniSection] = []
        self._current: int | None = None

    @property
    def sections(self) -> list[IniSection]:
        return self._sections.copy()

    @property
    def current(self) -> IniSection | None:
        """The section new keys go to, or `None` before any header."""
        if self._current is None:
            return None
        return self._sections[self._current]

    def add_section(self, name: str) -> IniSection:
        section = IniSection(name)
        self._sections.append(section)
        self._current = len(self._sections) - 1
        logger.debug('section [%s] opened (#%d)', name, self._current)
        return section

    def set_key(self, key: str, value: str, *, line: str | None = None) -> None:
        """Insert or overwrite `key` in the current section.

        `line` is only used to report a `KeyOutsideSection`.
        """
        if self._current is None:
            raise KeyOutsideSection(f'{key}={value}' if line is None else line)
        self._sections[self._current]._set(key, value)

    def find_section(self, name: str) -> IniSection:
        for section in self._sections:
            if section.name == name:
                return section
        raise SectionNotFound(name)

    def get_section(self, name: str) -> IniSection:
        return self.find_section(name)

    def get_sections(self) -> list[IniSection]:
        return self.sections

    def get_section_names(self) -> list[str]:
        return [i.name for i in self._sections]

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[IniSection]:
        return iter(self._sections)

    def __contains__(self, name: object) -> bool:
        return any(i.name == name for i in self._sections)

    def __str__(self) -> str:
        return f'{self.file_name} ({len(self._sections)} sections)'

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Nested dict view. On duplicated names only the first is kept,
        the same one `get_section()` would answer."""
        ret: dict[str, dict[str, str]] = {}
        for i in self._sections:
            ret.setdefault(i.name, i.to_dict())
        return ret

    # for `TypedAccessors`.
    def _lookup(self, section: str, key: str) -> str:
        return self.find_section(section).get(key, '')
