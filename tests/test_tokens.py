from __future__ import annotations

import pytest

from aischeduler.extract import ExtractValidationError, files, load_sources


class FakeEncoding:
    def __init__(self) -> None:
        self.calls = []

    def encode(self, text, allowed_special=()):
        self.calls.append(allowed_special)
        return text.split()


@pytest.fixture
def encoding(monkeypatch) -> FakeEncoding:
    fake = FakeEncoding()
    requested = []

    def fake_get_encoding(name):
        requested.append(name)
        return fake

    monkeypatch.setattr(files.tiktoken, "get_encoding", fake_get_encoding)
    files._encoding.cache_clear()
    fake.requested = requested
    yield fake
    files._encoding.cache_clear()


def test_count_tokens_uses_cached_encoding(encoding):
    assert files.count_tokens("standup at nine") == 3
    assert files.count_tokens("lunch") == 1
    assert encoding.requested == ["o200k_base"]
    assert encoding.calls == ["all", "all"]


def test_load_sources_counts_tokens(tmp_path, encoding):
    path = tmp_path / "notes.txt"
    path.write_text("gym at seven", encoding="utf-8")
    bundle = load_sources([path])
    assert bundle.tokens == len(bundle.content.split())


def test_load_sources_token_budget(tmp_path, monkeypatch, encoding):
    monkeypatch.setitem(files.SOURCE_CONSTRAINTS, "MAX_CONTENT_TOKENS", 2)
    path = tmp_path / "notes.txt"
    path.write_text("gym at seven", encoding="utf-8")
    with pytest.raises(ExtractValidationError):
        load_sources([path])
