"""Input line tokenizer.

Tokens are runs of non-whitespace characters; a double-quoted span keeps its
whitespace and loses the surrounding quotes. Backslashes are not special.
"""

from __future__ import annotations

import re

from file_manager.exceptions import ParseError

_TOKEN_RE = re.compile(r'(?:[^\s"]+|"[^"]*")+')
_EDGE_QUOTES_RE = re.compile(r'^"|"$')


def tokenize(line: str) -> list[str]:
    """Split ``line`` into ``[command, *arguments]``.

    Returns an empty list for blank input. Raises ParseError when a double quote
    is left open.
    """
    text = (line or "").strip()
    if not text:
        return []
    if text.count('"') % 2:
        raise ParseError(f"Unterminated quote in input: {text}")
    return [_EDGE_QUOTES_RE.sub("", token) for token in _TOKEN_RE.findall(text)]
