from __future__ import annotations
import io
import pytest

from smfnotes import config
from smfnotes.decode import decode_notes
from smfnotes.util import log


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    # keine echte ~/.config/smfnotes/config.yaml in den Tests
    monkeypatch.setattr(config, "USER_CFG_PATH", tmp_path / "no-such-user-config.yaml")
    log.set_verbose(False)
    yield
    log.set_verbose(False)


@pytest.fixture
def decode():
    """decode(data, **kw) -> (notes, summary)"""

    def _decode(data: bytes, **kw):
        notes = []
        summary = decode_notes(io.BytesIO(data), notes.append, **kw)
        return notes, summary

    return _decode
