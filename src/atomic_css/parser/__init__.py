from atomic_css.parser.errors import AtomicCSSError, StructuralParseError, ValidationError
from atomic_css.parser.tokenizer import TokenReader, parse_css

__all__ = [
    "AtomicCSSError",
    "StructuralParseError",
    "ValidationError",
    "TokenReader",
    "parse_css",
]
