"""Hand-written tokenizer for the subset of CSS the processor understands.

The tokenizer does not build a syntax tree. It splits the source into
semantic tokens, each of which is one of:

    a statement ending in ``;``         color: red;
    a bare fragment preceding a block   .foo
    a literal brace                     {  or  }

Comments collapse to a single space, runs of whitespace collapse to one
space, and string literals are copied verbatim.
"""

from __future__ import annotations

from typing import Iterator

__all__ = ["TokenReader", "parse_css"]


def _append_normalized(result: str, ch: str) -> str:
    """Append *ch* to *result*, folding any whitespace run into one space."""
    if not ch.isspace():
        return result + ch
    if result and result[-1].isspace():
        return result
    return result + " "


class TokenReader:
    """Pull-based reader over the tokens of a CSS string.

    ``read()`` returns the next token, or ``""`` once the input is
    exhausted. The most recent token is also kept in ``value`` so that
    sub-processors can inspect what was just consumed. A reader cannot be
    rewound; create a new one to scan the text again.
    """

    def __init__(self, css: str) -> None:
        self._css = css
        self._pos = 0
        self.value = ""

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._css)

    def read(self) -> str:
        """Read the next token from the input."""
        css = self._css
        length = len(css)
        i = self._pos
        result = ""
        while i < length:
            ch = css[i]
            i += 1

            # Escapes are copied through untouched.
            if ch == "\\":
                result += css[i - 1 : i + 1]
                i += 1
                continue

            if ch == "/" and i < length and css[i] == "*":
                result = _append_normalized(result, " ")
                end = css.find("*/", i + 1)
                i = length if end < 0 else end + 2
                continue

            if ch in ("'", '"'):
                start = i - 1
                while i < length and css[i] != ch:
                    i += 2 if css[i] == "\\" else 1
                i = min(i + 1, length)
                result += css[start:i]
                continue

            if ch == ";":
                result += ch
                break

            if ch in ("{", "}"):
                # Hand back the pending text first; the brace is re-read next.
                if result.strip():
                    i -= 1
                else:
                    result = ch
                break

            result = _append_normalized(result, ch)

        self._pos = min(i, length)
        self.value = result.strip()
        return self.value

    def __iter__(self) -> Iterator[str]:
        while True:
            token = self.read()
            if not token:
                return
            yield token


def parse_css(css: str) -> TokenReader:
    """Create a reader for extracting tokens from *css*."""
    return TokenReader(css)
