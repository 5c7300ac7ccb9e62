"""Shared fixtures for the INI reader tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_ini(tmp_path: Path):
    """Write `text` to an INI file under tmp_path and return its path."""
    def _write(text: str, name: str = 'config.ini', encoding: str = 'utf-8') -> str:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return str(path)
    return _write


SAMPLE = """\
; comment line
# also a comment

[database]
host=localhost
port=5432
dbfile=/var/lib/app.db
url=http://a=b
ratio=2.5e-3
debug=true

[users]
alice=admin
bob=guest
"""


@pytest.fixture
def sample_path(write_ini) -> str:
    return write_ini(SAMPLE)
