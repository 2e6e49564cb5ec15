"""Process a CSS file and, recursively, its simple imports.

- Inline ``@import "./relative.css";`` statements as anonymous layers
- Substitute the base layer at the first ``@layer base;``
- Extract utility definitions from ``@layer utilities { ... }``
- Expand ``@apply`` directives against the rule table
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from atomic_css.parser import StructuralParseError, TokenReader, ValidationError
from atomic_css.rules import Rule, RuleTable

__all__ = ["CSSBuilder", "expand_apply", "make_css_builder"]

logger = logging.getLogger(__name__)

BASE_LAYER_TOKEN = "@layer base;"
UTILITIES_LAYER_TOKEN = "@layer utilities"

# Only a lone relative string is inlinable; media conditions, url() and
# layer names leave the statement as-is.
_INLINABLE_IMPORT = re.compile(
    r"""^@import ("\.(?:[^"\\]|\\.)+"|'\.(?:[^'\\]|\\.)+');$"""
)
_ESCAPE = re.compile(r"\\(.)")
_APPLY_PREFIX = "@apply"
_APPLY_NAME = re.compile(r"[\w\-/.]+")


def expand_apply(token: str, rules: RuleTable) -> str:
    """Expand an ``@apply`` directive, or return any other token unchanged.

    The css of each named rule is concatenated in list order. Names with no
    rule contribute nothing.
    """
    if not token.startswith(_APPLY_PREFIX):
        return token
    names = _APPLY_NAME.findall(token[len(_APPLY_PREFIX) :])
    result = ""
    for name in names:
        rule = rules.get(name)
        if rule is not None:
            result += rule.css
    return result


def _import_path(token: str) -> str | None:
    """Return the unescaped path of an inlinable ``@import``, else ``None``."""
    match = _INLINABLE_IMPORT.match(token)
    if not match:
        return None
    path = _ESCAPE.sub(r"\1", match.group(1)[1:-1])
    if not path.endswith(".css"):
        return None
    return path


class _Loader:
    """State for one full pass over a root file and its import graph."""

    def __init__(self, base_layer: str, rules: RuleTable) -> None:
        self.base_layer: str | None = base_layer
        self.rules = rules
        self.filenames: list[str] = []
        # Files whose load is in progress, outermost first.
        self._stack: list[str] = []

    def load(self, filename: str) -> str:
        logger.debug("Loading %s", filename)
        self.filenames.append(filename)
        try:
            source = Path(filename).read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise StructuralParseError(
                f"File is not valid UTF-8: {exc}", filename=filename
            ) from exc

        self._stack.append(filename)
        try:
            return self._load_source(filename, source)
        finally:
            self._stack.pop()

    def _load_source(self, filename: str, source: str) -> str:
        reader = TokenReader(source)

        result = ""
        while reader.read():
            token = reader.value

            if token == BASE_LAYER_TOKEN:
                # The base text is consumed by the first occurrence only.
                if self.base_layer is not None:
                    result += f"@layer base {{{self.base_layer}}}"
                    self.base_layer = None
                else:
                    result += token
                continue

            if token.startswith("@import"):
                path = _import_path(token)
                if path is not None:
                    child = os.path.normpath(
                        os.path.join(os.path.dirname(filename), path)
                    )
                    if child in self._stack:
                        raise StructuralParseError(
                            f"Circular @import of {child}",
                            filename=filename,
                            token=token,
                        )
                    result += f"@layer {{{self.load(child)}}}"
                    continue

            if token == UTILITIES_LAYER_TOKEN:
                self._extract_utilities(reader, filename)
                continue

            result += expand_apply(token, self.rules)
        return result

    def _expect_block(self, reader: TokenReader, filename: str) -> None:
        token = reader.read()
        if token != "{":
            raise StructuralParseError(
                f'Failed to read block: expected "{{", got "{token}"',
                filename=filename,
                token=token,
            )

    def _read_block(self, reader: TokenReader, filename: str) -> str:
        """Read everything between an opening brace and its matching close.

        ``.foo { color: red; &:hover { color: blue; } }`` yields
        ``color: red;&:hover{color: blue;}``.
        """
        self._expect_block(reader, filename)
        result = ""
        depth = 0
        while reader.read():
            token = expand_apply(reader.value, self.rules)
            if token == "}":
                if depth == 0:
                    return result
                depth -= 1
            elif token == "{":
                depth += 1
            result += token
        raise StructuralParseError(
            "Unterminated block: expected \"}\" before end of file",
            filename=filename,
        )

    def _extract_utilities(self, reader: TokenReader, filename: str) -> None:
        """Register every rule of an ``@layer utilities`` block in the table."""
        self._expect_block(reader, filename)
        specificity = 0
        while reader.read():
            token = reader.value
            if token == "}":
                return
            if not token.startswith("."):
                raise ValidationError(token, filename=filename)
            # Declaration order decides output order.
            specificity += 1
            css = self._read_block(reader, filename)
            self.rules.set(token[1:], Rule(css=css, specificity=specificity))
        raise StructuralParseError(
            "Unterminated @layer utilities block", filename=filename
        )


class CSSBuilder:
    """Builds the processed CSS of a root file.

    Every call to :meth:`update` re-reads the root file and its imports from
    disk. ``filenames`` lists every file loaded by the last successful pass,
    which callers watch to trigger rebuilds.
    """

    def __init__(self, filename: str | Path, base_layer: str, rules: RuleTable) -> None:
        self.filename = os.path.normpath(str(filename))
        self.base_layer = base_layer
        self.rules = rules
        self._filenames: list[str] = []
        self._content = ""
        self.update()

    @property
    def filenames(self) -> list[str]:
        return list(self._filenames)

    def update(self) -> None:
        """Run a full pass; on error the previous output is left untouched."""
        loader = _Loader(self.base_layer, self.rules)
        content = loader.load(self.filename)
        self._filenames = loader.filenames
        self._content = content

    def to_string(self) -> str:
        return self._content

    def __str__(self) -> str:
        return self._content


def make_css_builder(
    filename: str | Path, base_layer: str, rules: RuleTable
) -> CSSBuilder:
    """Create a :class:`CSSBuilder` and run its first pass."""
    return CSSBuilder(filename, base_layer, rules)
