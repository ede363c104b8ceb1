"""JavaScript minifier collaborators."""

from __future__ import annotations

from typing import Protocol

import rjsmin


class Minifier(Protocol):
    """Minify JavaScript source text."""

    def minify(self, source: str) -> str:
        """Return minified *source*; raise on failure."""
        ...


class RJSMinifier:
    """Minifier backed by :mod:`rjsmin`.

    Comments are dropped, including ``sourceMappingURL`` directives.
    """

    def __init__(self, *, keep_bang_comments: bool = False) -> None:
        self.keep_bang_comments = keep_bang_comments

    def minify(self, source: str) -> str:
        return rjsmin.jsmin(source, keep_bang_comments=self.keep_bang_comments)
