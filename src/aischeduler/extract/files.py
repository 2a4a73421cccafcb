"""Source file intake for event extraction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable

import tiktoken

from .constants import SOURCE_CONSTRAINTS
from .errors import ExtractValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFile:
    name: str
    path: Path
    size: int
    content: str


@dataclass(frozen=True)
class SourceBundle:
    files: tuple[SourceFile, ...]
    content: str
    tokens: int

    @property
    def total_size(self) -> int:
        return sum(source.size for source in self.files)


@lru_cache(maxsize=1)
def _encoding() -> tiktoken.Encoding:
    return tiktoken.get_encoding("o200k_base")


def count_tokens(text: str) -> int:
    return len(_encoding().encode(text, allowed_special="all"))


def format_file_size(size: int) -> str:
    if size == 0:
        return "0 Bytes"
    value = float(size)
    for unit in ("Bytes", "KB", "MB"):
        if value < 1024:
            return f"{value:.2f}".rstrip("0").rstrip(".") + f" {unit}"
        value /= 1024
    return f"{value:.2f}".rstrip("0").rstrip(".") + " GB"


def validate_source_path(path: Path) -> int:
    if not path.is_file():
        raise ExtractValidationError(f'File "{path.name}" does not exist', field="files", value=str(path))
    if path.suffix.lower() not in SOURCE_CONSTRAINTS["EXTENSIONS"]:
        raise ExtractValidationError(
            f'File "{path.name}" has invalid type. Only .md, .json, and .txt files are allowed',
            field="files",
            value=str(path),
        )
    size = path.stat().st_size
    if size > SOURCE_CONSTRAINTS["MAX_FILE_BYTES"]:
        limit = format_file_size(SOURCE_CONSTRAINTS["MAX_FILE_BYTES"])
        raise ExtractValidationError(f'File "{path.name}" is too large (max {limit})', field="files", value=str(path))
    return size


def load_sources(paths: Iterable[Path]) -> SourceBundle:
    resolved = [path.expanduser().resolve() for path in paths]
    if not resolved:
        raise ExtractValidationError("No files uploaded", field="files")
    if len(resolved) > SOURCE_CONSTRAINTS["MAX_FILES"]:
        raise ExtractValidationError(
            f"Too many files (max {SOURCE_CONSTRAINTS['MAX_FILES']})",
            field="files",
            value=len(resolved),
        )

    seen: set[Path] = set()
    sources: list[SourceFile] = []
    for path in resolved:
        if path in seen:
            raise ExtractValidationError(f'File "{path.name}" is already added', field="files", value=str(path))
        seen.add(path)
        size = validate_source_path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Error reading file %s: %s", path.name, exc)
            continue
        sources.append(SourceFile(name=path.name, path=path, size=size, content=content))

    combined = "".join(f"\n\n--- {source.name} ---\n{source.content}" for source in sources)
    if not any(source.content.strip() for source in sources):
        raise ExtractValidationError("No readable content found in uploaded files", field="files")

    tokens = count_tokens(combined)
    if tokens > SOURCE_CONSTRAINTS["MAX_CONTENT_TOKENS"]:
        raise ExtractValidationError(
            f"Content is too long ({tokens} tokens, max {SOURCE_CONSTRAINTS['MAX_CONTENT_TOKENS']})",
            field="files",
            value=tokens,
        )

    logger.info("Loaded %d file(s), %d tokens", len(sources), tokens)
    return SourceBundle(files=tuple(sources), content=combined, tokens=tokens)
