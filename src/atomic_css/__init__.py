"""atomic_css: a small utility-first CSS generator.

Scans source files for class names, resolves them against rules generated
from a design-token configuration, and writes only the utilities in use.
"""

__version__ = "0.1.0"

from atomic_css.build import (  # noqa: E402
    BuildContext,
    BuildOptions,
    BuildSession,
    stringify_css,
    watch,
    write_css,
)
from atomic_css.config import Config, compile_config  # noqa: E402
from atomic_css.layer import UtilitiesLayerBuilder, make_utilities_layer_builder  # noqa: E402
from atomic_css.parser import (  # noqa: E402
    AtomicCSSError,
    StructuralParseError,
    TokenReader,
    ValidationError,
    parse_css,
)
from atomic_css.processor import CSSBuilder, make_css_builder  # noqa: E402
from atomic_css.rules import Rule, RuleTable, config_to_rules  # noqa: E402

__all__ = [
    "__version__",
    "AtomicCSSError",
    "BuildContext",
    "BuildOptions",
    "BuildSession",
    "CSSBuilder",
    "Config",
    "Rule",
    "RuleTable",
    "StructuralParseError",
    "TokenReader",
    "UtilitiesLayerBuilder",
    "ValidationError",
    "compile_config",
    "config_to_rules",
    "make_css_builder",
    "make_utilities_layer_builder",
    "parse_css",
    "stringify_css",
    "watch",
    "write_css",
]
