# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 15:02:33
# @Author : Kariko Lin

"""Line based INI reader.

Each line is trimmed and then treated as one of:
1. blank, or a comment starting with `;` or `#`: skipped;
2. `[name]`: opens a new section (anything after `]` is dropped);
3. `key=value`: split on the FIRST `=`, both sides kept verbatim.

The first bad line aborts the whole load. There are no inline comments,
no quoting and no multi-line values.
"""

import logging
from io import StringIO, TextIOBase

import chardet

from ..abstract import FileHandler
from .errors import (
    FileError,
    IniError,
    KeyOutsideSection,
    MalformedKeyValueLine,
    MalformedSectionHeader
)
from .model import IniConfig
from .paths import PathResolver, executable_relative

__all__ = ['IniParser', 'load']

logger = logging.getLogger(__name__)

COMMENT_MARKS = (';', '#', '\r', '\n')


class IniParser(FileHandler[IniConfig]):
    def __init__(
        self, filename: str,
        encoding: str | None = None,
        resolver: PathResolver = executable_relative
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._resolve = resolver

    @staticmethod
    def parse_line(ins: IniConfig, line: str) -> None:
        """Apply a single line to `ins`. Never mind trimming, done here."""
        line = line.strip()
        if not line or line[0] in COMMENT_MARKS:
            return

        if line[0] == '[':
            pos = line.find(']')
            if pos < 1:
                raise MalformedSectionHeader(line)
            ins.add_section(line[1:pos])
            return

        if ins.current is None:
            raise KeyOutsideSection(line)
        pos = line.find('=')
        if pos < 1:
            raise MalformedKeyValueLine(line)
        ins.set_key(line[:pos], line[pos + 1:])

    @staticmethod
    def readstream(
        buf: TextIOBase, ins: IniConfig | None = None
    ) -> IniConfig:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        if ins is None:
            ins = IniConfig()
        while i := buf.readline():
            IniParser.parse_line(ins, i)
        return ins

    def _decode_file(self, filename: str) -> StringIO:
        try:
            with open(filename, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise FileError(filename, e.strerror or str(e)) from e

        codec = chardet.detect(raw)
        if not codec['encoding'] or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8', 'confidence': 1.0}
        logger.warning(
            '%s is not %s, decoding as %s instead.',
            filename, self._codec or 'utf-8', codec['encoding'])

        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError) as e:
            raise FileError(filename, str(e)) from e
        return StringIO(buf.removeprefix('\ufeff'), newline='\n')

    def read(self) -> IniConfig:
        """Parse the file this parser was created for.

        A bare file name is resolved by the `resolver` given at init.
        """
        path = self._resolve(self._fn)
        logger.debug('loading %s (from %s)', path, self._fn)
        try:
            # utf-8-sig also drops a leading BOM.
            with open(
                path, 'r', encoding=self._codec or 'utf-8-sig', newline='\n'
            ) as fp:
                ret = self.readstream(fp, IniConfig(path))
        except IniError:
            raise
        except UnicodeDecodeError:
            ret = self.readstream(self._decode_file(path), IniConfig(path))
        except OSError as e:
            raise FileError(path, e.strerror or str(e)) from e
        except LookupError as e:  # unknown codec name
            raise FileError(path, str(e)) from e
        logger.debug('loaded %d sections from %s', len(ret), path)
        return ret

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f' ({self._codec})'


def load(
    path: str, *,
    encoding: str | None = None,
    resolver: PathResolver = executable_relative
) -> IniConfig:
    """Load and parse the INI file at `path`."""
    return IniParser(path, encoding, resolver).read()
