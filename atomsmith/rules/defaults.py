"""Built-in rule catalog, a subset of the common Atomizer families."""

from __future__ import annotations

from atomsmith.rules.models import Rule

_DIRECTION = {"start": "__START__", "end": "__END__"}

_SIZE = {"a": "auto", "0": "0"}

DEFAULT_RULES: list[Rule] = [
    Rule(matcher="Bgc", name="Background color", styles={"background-color": "$0"},
         values={"t": "transparent", "cc": "currentColor"}),
    Rule(matcher="C", name="Color", styles={"color": "$0"},
         values={"t": "transparent", "cc": "currentColor"}),
    Rule(matcher="Bdc", name="Border color", styles={"border-color": "$0"},
         values={"t": "transparent", "cc": "currentColor"}),
    Rule(
        matcher="D",
        name="Display",
        styles={"display": "$0"},
        values={
            "b": "block",
            "ib": "inline-block",
            "i": "inline",
            "f": "flex",
            "if": "inline-flex",
            "g": "grid",
            "tb": "table",
            "tbc": "table-cell",
            "n": "none",
        },
        allow_param_to_value=False,
        legacy={"inline-block": {"*display": "inline", "zoom": "1"}},
    ),
    Rule(matcher="Pos", name="Position", styles={"position": "$0"},
         values={"a": "absolute", "r": "relative", "f": "fixed", "s": "sticky", "st": "static"},
         allow_param_to_value=False),
    Rule(matcher="Fl", name="Float", styles={"float": "$0"},
         values={**_DIRECTION, "n": "none"}, allow_param_to_value=False,
         legacy={"*": {"display": "inline"}}),
    Rule(matcher="Ta", name="Text align", styles={"text-align": "$0"},
         values={**_DIRECTION, "c": "center", "j": "justify"}, allow_param_to_value=False),
    Rule(matcher="Fz", name="Font size", styles={"font-size": "$0"}),
    Rule(matcher="Fw", name="Font weight", styles={"font-weight": "$0"},
         values={"b": "bold", "n": "normal", "l": "lighter", "br": "bolder"}),
    Rule(matcher="Lh", name="Line height", styles={"line-height": "$0"}, values={"n": "normal"}),
    Rule(matcher="W", name="Width", styles={"width": "$0"}, values=_SIZE),
    Rule(matcher="H", name="Height", styles={"height": "$0"}, values=_SIZE),
    Rule(matcher="M", name="Margin", styles={"margin": "$0"}, values=_SIZE),
    Rule(matcher="Mt", name="Margin top", styles={"margin-top": "$0"}, values=_SIZE),
    Rule(matcher="Mb", name="Margin bottom", styles={"margin-bottom": "$0"}, values=_SIZE),
    Rule(matcher="Mstart", name="Margin start", styles={"margin-__START__": "$0"}, values=_SIZE),
    Rule(matcher="Mend", name="Margin end", styles={"margin-__END__": "$0"}, values=_SIZE),
    Rule(matcher="P", name="Padding", styles={"padding": "$0"}),
    Rule(matcher="Pt", name="Padding top", styles={"padding-top": "$0"}),
    Rule(matcher="Pb", name="Padding bottom", styles={"padding-bottom": "$0"}),
    Rule(matcher="Pstart", name="Padding start", styles={"padding-__START__": "$0"}),
    Rule(matcher="Pend", name="Padding end", styles={"padding-__END__": "$0"}),
    Rule(matcher="Start", name="Start offset", styles={"__START__": "$0"}, values=_SIZE),
    Rule(matcher="End", name="End offset", styles={"__END__": "$0"}, values=_SIZE),
    Rule(matcher="Op", name="Opacity", styles={"opacity": "$0"}),
    Rule(matcher="Bd", name="Border", styles={"border": "$0"}, values={"n": "none"}),
    Rule(matcher="Bdrs", name="Border radius", styles={"border-radius": "$0"}),
    Rule(matcher="Trf", name="Transform", styles={"transform": "$0"}, values={"n": "none"}),
    Rule(matcher="Sh", name="Box shadow", styles={"box-shadow": "$0 $1 $2 $3"}),
    Rule(
        matcher="Cf",
        name="Clearfix",
        type="helper",
        styles={"content": '""', "display": "table", "clear": "both"},
        selector_suffix="::after",
    ),
    Rule(
        matcher="Ell",
        name="Ellipsis",
        type="helper",
        styles={"max-width": "100%", "white-space": "nowrap", "overflow": "hidden",
                "text-overflow": "ellipsis"},
    ),
    Rule(
        matcher="Hidden",
        name="Visually hidden",
        type="helper",
        styles={"position": "absolute", "clip": "rect(1px,1px,1px,1px)", "overflow": "hidden",
                "height": "1px", "width": "1px", "padding": "0", "border": "0"},
    ),
    Rule(
        matcher="LineClamp",
        name="Line clamp",
        type="helper",
        styles={"-webkit-line-clamp": "$0", "max-height": "$1", "display": "-webkit-box",
                "-webkit-box-orient": "vertical", "overflow": "hidden"},
    ),
]
