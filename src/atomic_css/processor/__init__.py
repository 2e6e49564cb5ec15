from atomic_css.processor.css_processor import CSSBuilder, expand_apply, make_css_builder

__all__ = ["CSSBuilder", "expand_apply", "make_css_builder"]
