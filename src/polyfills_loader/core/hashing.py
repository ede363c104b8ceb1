"""Content hashing for cache-safe output file names."""

from __future__ import annotations

import hashlib
from typing import Protocol


class ContentHasher(Protocol):
    def __call__(self, content: str) -> str: ...


def md5_content_hash(content: str) -> str:
    """Return the hex md5 digest of *content* encoded as UTF-8."""
    return hashlib.md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()
