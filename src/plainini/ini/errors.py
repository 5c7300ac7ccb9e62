# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/19 14:02:11
# @Author : Kariko Lin

from enum import Enum


class ErrorKind(str, Enum):
    FILE = 'FileError'
    MALFORMED_SECTION_HEADER = 'MalformedSectionHeader'
    KEY_OUTSIDE_SECTION = 'KeyOutsideSection'
    MALFORMED_KEY_VALUE_LINE = 'MalformedKeyValueLine'
    SECTION_NOT_FOUND = 'SectionNotFound'
    KEY_NOT_FOUND = 'KeyNotFound'
    TYPE_CONVERSION = 'TypeConversion'


class IniError(Exception):
    """Base of every error raised while loading or querying an INI file.

    `kind` tells which condition it is, and `payload` keeps the offending
    text (a raw line, a section name, a key, or a path).
    """
    kind: ErrorKind

    def __init__(self, message: str, payload: str) -> None:
        super().__init__(message)
        self.payload = payload


class FileError(IniError):
    """The file could not be opened, read or decoded."""
    kind = ErrorKind.FILE

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'Failed to read "{path}": {reason}', path)
        self.path = path


class MalformedSectionHeader(IniError):
    kind = ErrorKind.MALFORMED_SECTION_HEADER

    def __init__(self, line: str) -> None:
        super().__init__(f'Failed to parse section header: {line}', line)


class KeyOutsideSection(IniError):
    kind = ErrorKind.KEY_OUTSIDE_SECTION

    def __init__(self, line: str) -> None:
        super().__init__(f'Key is not under any section: {line}', line)


class MalformedKeyValueLine(IniError):
    kind = ErrorKind.MALFORMED_KEY_VALUE_LINE

    def __init__(self, line: str) -> None:
        super().__init__(f'Failed to parse key line: {line}', line)


class SectionNotFound(IniError):
    kind = ErrorKind.SECTION_NOT_FOUND

    def __init__(self, name: str) -> None:
        super().__init__(f'Section not found: {name}', name)


class KeyNotFound(IniError, KeyError):
    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, section: str, key: str) -> None:
        super().__init__(f'Key {key} not found in [{section}]', key)
        self.section = section

    # KeyError would repr() the message otherwise.
    def __str__(self) -> str:
        return str(self.args[0])


class TypeConversion(IniError, ValueError):
    """The stored string is not a valid literal of the requested type."""
    kind = ErrorKind.TYPE_CONVERSION

    def __init__(
        self, section: str, key: str,
        target: str, text: str, reason: str
    ) -> None:
        super().__init__(
            f'[{section}] {key}: parsing {text!r} as {target}: {reason}',
            text)
        self.section = section
        self.key = key
        self.target = target
        self.reason = reason
