from atomic_css.config.compiler import (
    CATEGORIES,
    Category,
    CategoryKind,
    Config,
    compile_config,
    hex_to_rgb,
    load_config_file,
)

__all__ = [
    "CATEGORIES",
    "Category",
    "CategoryKind",
    "Config",
    "compile_config",
    "hex_to_rgb",
    "load_config_file",
]
