"""Literal utilities that do not depend on the configuration.

Each entry is ``(name, css, specificity)``. Specificity encodes cascade
precedence: a directional rule must outrank its shorthand, so
``overflow-x-auto`` (1) is written after ``overflow-hidden`` (0).
"""

from __future__ import annotations

TRANSFORM = " ".join(
    [
        "transform:",
        "translate(var(--tw-translate-x), var(--tw-translate-y))",
        "rotate(var(--tw-rotate))",
        "skewX(var(--tw-skew-x))",
        "skewY(var(--tw-skew-y))",
        "scaleX(var(--tw-scale-x))",
        "scaleY(var(--tw-scale-y))",
    ]
)

_TRANSITION_EASE = "transition-timing-function: cubic-bezier(0.4, 0, 0.2, 1);"
_TRANSITION_DURATION = "transition-duration: 150ms;"


def _transition(properties: str) -> str:
    return f"transition-property: {properties};{_TRANSITION_EASE}{_TRANSITION_DURATION}"


def _gradient(direction: str) -> str:
    return f"background-image: linear-gradient(to {direction}, var(--tw-gradient-stops));"


def _backdrop_blur(value: str) -> str:
    stack = " ".join(
        f"var(--tw-backdrop-{name})"
        for name in (
            "blur",
            "brightness",
            "contrast",
            "grayscale",
            "hue-rotate",
            "invert",
            "opacity",
            "saturate",
            "sepia",
        )
    )
    return (
        f"--tw-backdrop-blur: {value};"
        f"-webkit-backdrop-filter: {stack};"
        f"backdrop-filter: {stack};"
    )


# fmt: off
STATIC_RULES: list[tuple[str, str, int]] = [
    ("animate-none",          "animation: none;", 0),

    ("italic",                "font-style: italic;", 0),
    ("not-italic",            "font-style: normal;", 0),

    ("uppercase",             "text-transform: uppercase;", 0),
    ("lowercase",             "text-transform: lowercase;", 0),
    ("capitalize",            "text-transform: capitalize;", 0),
    ("normal-case",           "text-transform: none;", 0),

    ("static",                "position: static;", 0),
    ("fixed",                 "position: fixed;", 0),
    ("absolute",              "position: absolute;", 0),
    ("relative",              "position: relative;", 0),
    ("sticky",                "position: sticky;", 0),

    ("visible",               "visibility: visible;", 0),
    ("invisible",             "visibility: hidden;", 0),
    ("collapse",              "visibility: collapse;", 0),

    ("block",                 "display: block;", 0),
    ("inline-block",          "display: inline-block;", 0),
    ("inline",                "display: inline;", 0),
    ("flex",                  "display: flex;", 0),
    ("inline-flex",           "display: inline-flex;", 0),
    ("table",                 "display: table;", 0),
    ("inline-table",          "display: inline-table;", 0),
    ("table-caption",         "display: table-caption;", 0),
    ("table-cell",            "display: table-cell;", 0),
    ("table-column",          "display: table-column;", 0),
    ("table-column-group",    "display: table-column-group;", 0),
    ("table-footer-group",    "display: table-footer-group;", 0),
    ("table-header-group",    "display: table-header-group;", 0),
    ("table-row-group",       "display: table-row-group;", 0),
    ("table-row",             "display: table-row;", 0),
    ("flow-root",             "display: flow-root;", 0),
    ("grid",                  "display: grid;", 0),
    ("inline-grid",           "display: inline-grid;", 0),
    ("contents",              "display: contents;", 0),
    ("list-item",             "display: list-item;", 0),
    ("hidden",                "display: none;", 1),
    ("grow",                  "flex-grow: 1;", 0),
    ("grow-0",                "flex-grow: 0;", 1),

    ("flex-row",              "flex-direction: row;", 0),
    ("flex-col",              "flex-direction: column;", 0),
    ("justify-normal",        "justify-content: normal;", 0),
    ("justify-start",         "justify-content: flex-start;", 0),
    ("justify-end",           "justify-content: flex-end;", 0),
    ("justify-center",        "justify-content: center;", 0),
    ("justify-between",       "justify-content: space-between;", 0),
    ("justify-around",        "justify-content: space-around;", 0),
    ("justify-evenly",        "justify-content: space-evenly;", 0),
    ("justify-stretch",       "justify-content: stretch;", 0),
    ("items-start",           "align-items: flex-start;", 0),
    ("items-end",             "align-items: flex-end;", 0),
    ("items-center",          "align-items: center;", 0),
    ("items-baseline",        "align-items: baseline;", 0),
    ("items-stretch",         "align-items: stretch;", 0),

    ("auto-cols-auto",        "grid-auto-columns: auto;", 0),
    ("auto-cols-min",         "grid-auto-columns: min-content;", 0),
    ("auto-cols-max",         "grid-auto-columns: max-content;", 0),
    ("auto-cols-fr",          "grid-auto-columns: minmax(0, 1fr);", 0),
    ("auto-rows-auto",        "grid-auto-rows: auto;", 0),
    ("auto-rows-min",         "grid-auto-rows: min-content;", 0),
    ("auto-rows-max",         "grid-auto-rows: max-content;", 0),
    ("auto-rows-fr",          "grid-auto-rows: minmax(0, 1fr);", 0),

    ("grid-cols-none",        "grid-template-columns: none;", 0),
    ("grid-cols-subgrid",     "grid-template-columns: subgrid;", 0),
    ("grid-rows-none",        "grid-template-rows: none;", 0),
    ("grid-rows-subgrid",     "grid-template-rows: subgrid;", 0),

    ("col-span-full",         "grid-column: 1 / -1;", 0),
    ("row-span-full",         "grid-row: 1 / -1;", 0),
    ("grid-flow-row",         "grid-auto-flow: row;", 0),
    ("grid-flow-col",         "grid-auto-flow: column;", 0),
    ("grid-flow-dense",       "grid-auto-flow: dense;", 0),
    ("grid-flow-row-dense",   "grid-auto-flow: row dense;", 0),
    ("grid-flow-col-dense",   "grid-auto-flow: column dense;", 0),
    ("col-auto",              "grid-column: auto;", 0),
    ("row-auto",              "grid-row: auto;", 0),
    ("col-start-auto",        "grid-column-start: auto;", 0),
    ("row-start-auto",        "grid-row-start: auto;", 0),
    ("col-end-auto",          "grid-column-end: auto;", 0),
    ("row-end-auto",          "grid-row-end: auto;", 0),

    ("origin-center",         "transform-origin: center;", 0),
    ("origin-top",            "transform-origin: top;", 0),
    ("origin-top-right",      "transform-origin: top right;", 0),
    ("origin-right",          "transform-origin: right;", 0),
    ("origin-bottom-right",   "transform-origin: bottom right;", 0),
    ("origin-bottom",         "transform-origin: bottom;", 0),
    ("origin-bottom-left",    "transform-origin: bottom left;", 0),
    ("origin-left",           "transform-origin: left;", 0),
    ("origin-top-left",       "transform-origin: top left;", 0),

    ("outline-none",          "outline: 2px solid transparent;outline-offset: 2px;", 2),
    ("outline",               "outline-style: solid;", 1),
    ("outline-dashed",        "outline-style: dashed;", 1),
    ("outline-dotted",        "outline-style: dotted;", 1),
    ("outline-double",        "outline-style: double;", 1),
    ("outline-0",             "outline-width: 0px;", 1),
    ("outline-1",             "outline-width: 1px;", 1),
    ("outline-2",             "outline-width: 2px;", 1),
    ("outline-4",             "outline-width: 4px;", 1),
    ("outline-8",             "outline-width: 8px;", 1),
    ("outline-offset-0",      "outline-offset: 0px;", 0),
    ("outline-offset-1",      "outline-offset: 1px;", 0),
    ("outline-offset-2",      "outline-offset: 2px;", 0),
    ("outline-offset-4",      "outline-offset: 4px;", 0),
    ("outline-offset-8",      "outline-offset: 8px;", 0),

    ("overflow-auto",         "overflow: auto;", 0),
    ("overflow-hidden",       "overflow: hidden;", 0),
    ("overflow-clip",         "overflow: clip;", 0),
    ("overflow-visible",      "overflow: visible;", 0),
    ("overflow-scroll",       "overflow: scroll;", 0),
    ("overflow-x-auto",       "overflow-x: auto;", 1),
    ("overflow-x-hidden",     "overflow-x: hidden;", 1),
    ("overflow-x-clip",       "overflow-x: clip;", 1),
    ("overflow-x-visible",    "overflow-x: visible;", 1),
    ("overflow-x-scroll",     "overflow-x: scroll;", 1),
    ("overflow-y-auto",       "overflow-y: auto;", 1),
    ("overflow-y-hidden",     "overflow-y: hidden;", 1),
    ("overflow-y-clip",       "overflow-y: clip;", 1),
    ("overflow-y-visible",    "overflow-y: visible;", 1),
    ("overflow-y-scroll",     "overflow-y: scroll;", 1),

    ("border-solid",          "border-style: solid;", 0),
    ("border-dashed",         "border-style: dashed;", 0),
    ("border-dotted",         "border-style: dotted;", 0),
    ("border-double",         "border-style: double;", 0),
    ("border-hidden",         "border-style: hidden;", 0),
    ("border-none",           "border-style: none;", 0),

    ("bg-clip-border",        "background-clip: border-box;", 0),
    ("bg-clip-padding",       "background-clip: padding-box;", 0),
    ("bg-clip-content",       "background-clip: content-box;", 0),
    ("bg-clip-text",          "background-clip: text;", 0),

    ("aspect-auto",           "aspect-ratio: auto;", 1),
    ("aspect-square",         "aspect-ratio: 1 / 1;", 0),
    ("aspect-video",          "aspect-ratio: 16 / 9;", 0),

    ("box-border",            "box-sizing: border-box;", 0),
    ("box-content",           "box-sizing: content-box;", 0),

    ("underline",             "text-decoration-line: underline;", 0),
    ("overline",              "text-decoration-line: overline;", 0),
    ("line-through",          "text-decoration-line: line-through;", 0),
    ("no-underline",          "text-decoration-line: none;", 0),
    ("decoration-solid",      "text-decoration-style: solid;", 0),
    ("decoration-double",     "text-decoration-style: double;", 0),
    ("decoration-dotted",     "text-decoration-style: dotted;", 0),
    ("decoration-dashed",     "text-decoration-style: dashed;", 0),
    ("decoration-wavy",       "text-decoration-style: wavy;", 0),
    ("decoration-auto",       "text-decoration-thickness: auto;", 0),
    ("decoration-from-font",  "text-decoration-thickness: from-font;", 0),
    ("decoration-0",          "text-decoration-thickness: 0px;", 0),
    ("decoration-1",          "text-decoration-thickness: 1px;", 0),
    ("decoration-2",          "text-decoration-thickness: 2px;", 0),
    ("decoration-4",          "text-decoration-thickness: 4px;", 0),
    ("decoration-8",          "text-decoration-thickness: 8px;", 0),
    ("underline-offset-auto", "text-underline-offset: auto;", 0),
    ("underline-offset-0",    "text-underline-offset: 0px;", 0),
    ("underline-offset-1",    "text-underline-offset: 1px;", 0),
    ("underline-offset-2",    "text-underline-offset: 2px;", 0),
    ("underline-offset-4",    "text-underline-offset: 4px;", 0),
    ("underline-offset-8",    "text-underline-offset: 8px;", 0),

    ("break-normal",          "overflow-wrap: normal;word-break: normal;", 0),
    ("break-words",           "overflow-wrap: break-word;", 0),
    ("break-all",             "word-break: break-all;", 0),
    ("break-keep",            "word-break: keep-all;", 0),
    ("text-wrap",             "text-wrap: wrap;", 0),
    ("text-nowrap",           "text-wrap: nowrap;", 0),
    ("text-balance",          "text-wrap: balance;", 0),
    ("text-pretty",           "text-wrap: pretty;", 0),
    ("truncate",              "overflow: hidden;text-overflow: ellipsis;white-space: nowrap;", 1),
    ("text-ellipsis",         "text-overflow: ellipsis;", 0),
    ("text-clip",             "text-overflow: clip;", 0),

    ("z-0",                   "z-index: 0;", 0),
    ("z-10",                  "z-index: 10;", 0),
    ("z-20",                  "z-index: 20;", 0),
    ("z-30",                  "z-index: 30;", 0),
    ("z-40",                  "z-index: 40;", 0),
    ("z-50",                  "z-index: 50;", 0),
    ("z-auto",                "z-index: auto;", 0),

    ("text-left",             "text-align: left;", 0),
    ("text-center",           "text-align: center;", 0),
    ("text-right",            "text-align: right;", 0),
    ("text-justify",          "text-align: justify;", 0),
    ("text-start",            "text-align: start;", 0),
    ("text-end",              "text-align: end;", 0),

    ("whitespace-normal",       "white-space: normal;", 0),
    ("whitespace-nowrap",       "white-space: nowrap;", 0),
    ("whitespace-pre",          "white-space: pre;", 0),
    ("whitespace-pre-line",     "white-space: pre-line;", 0),
    ("whitespace-pre-wrap",     "white-space: pre-wrap;", 0),
    ("whitespace-break-spaces", "white-space: break-spaces;", 0),

    ("shadow-invert-y",       "--tw-shadow-y: -1;", 1),

    ("backdrop-blur-none",    _backdrop_blur(""), 0),
    ("backdrop-blur-sm",      _backdrop_blur("blur(4px)"), 0),
    ("backdrop-blur",         _backdrop_blur("blur(8px)"), 0),
    ("backdrop-blur-md",      _backdrop_blur("blur(12px)"), 0),
    ("backdrop-blur-lg",      _backdrop_blur("blur(16px)"), 0),
    ("backdrop-blur-xl",      _backdrop_blur("blur(24px)"), 0),
    ("backdrop-blur-2xl",     _backdrop_blur("blur(40px)"), 0),
    ("backdrop-blur-3xl",     _backdrop_blur("blur(64px)"), 0),

    ("ease-linear",           "transition-timing-function: linear;", 1),
    ("ease-in",               "transition-timing-function: cubic-bezier(0.4, 0, 1, 1);", 1),
    ("ease-out",              "transition-timing-function: cubic-bezier(0, 0, 0.2, 1);", 1),
    ("ease-in-out",           "transition-timing-function: cubic-bezier(0.4, 0, 0.2, 1);", 1),
    ("transition-none",       "transition-property: none;", 1),
    ("transition-all",        _transition("all"), 0),
    ("transition",            _transition(
        "color, background-color, border-color, text-decoration-color, fill, stroke, "
        "opacity, box-shadow, transform, filter, backdrop-filter"), 0),
    ("transition-colors",     _transition(
        "color, background-color, border-color, text-decoration-color, fill, stroke"), 0),
    ("transition-opacity",    _transition("opacity"), 0),
    ("transition-shadow",     _transition("box-shadow"), 0),
    ("transition-transform",  _transition("transform"), 0),

    ("bg-none",               "background-image: none;", 1),
    ("bg-gradient-to-t",      _gradient("top"), 0),
    ("bg-gradient-to-tr",     _gradient("top right"), 0),
    ("bg-gradient-to-r",      _gradient("right"), 0),
    ("bg-gradient-to-br",     _gradient("bottom right"), 0),
    ("bg-gradient-to-b",      _gradient("bottom"), 0),
    ("bg-gradient-to-bl",     _gradient("bottom left"), 0),
    ("bg-gradient-to-l",      _gradient("left"), 0),
    ("bg-gradient-to-tl",     _gradient("top left"), 0),
]

ROTATIONS: list[int] = [0, 1, 2, 3, 6, 12, 45, 180]

TIMINGS: list[int] = [0, 75, 100, 150, 200, 300, 500, 700, 1000]

# Animation name -> (css, @keyframes sibling)
ANIMATIONS: dict[str, tuple[str, str]] = {
    "spin": (
        "animation: spin 1s linear infinite;",
        "@keyframes spin { from { transform: rotate(0deg); } to { transform: rotate(360deg); } }",
    ),
    "ping": (
        "animation: ping 1s cubic-bezier(0, 0, 0.2, 1) infinite;",
        "@keyframes ping { 75%, 100% { transform: scale(2); opacity: 0; } }",
    ),
    "pulse": (
        "animation: pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite;",
        "@keyframes pulse { 0%, 100% { opacity: 1; } 50% { opacity: .5; } }",
    ),
    "bounce": (
        "animation: bounce 1s infinite;",
        "@keyframes bounce { "
        "0%, 100% { transform: translateY(-25%); animation-timing-function: cubic-bezier(0.8, 0, 1, 1); } "
        "50% { transform: translateY(0); animation-timing-function: cubic-bezier(0, 0, 0.2, 1); } }",
    ),
}
# fmt: on
