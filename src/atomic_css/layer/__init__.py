from atomic_css.layer.builder import (
    OutputRule,
    UtilitiesLayerBuilder,
    extract_candidates,
    make_output_rule,
    make_utilities_layer_builder,
    merge_duplicate_rules,
    stringify_utilities,
)

__all__ = [
    "OutputRule",
    "UtilitiesLayerBuilder",
    "extract_candidates",
    "make_output_rule",
    "make_utilities_layer_builder",
    "merge_duplicate_rules",
    "stringify_utilities",
]
