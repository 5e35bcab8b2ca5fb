"""Constants used across caniprefix."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

PREF_ENABLED: Final[str] = "caniuse.enabled"
PREF_VENDORS: Final[str] = "caniuse.vendors"
PREF_ERA: Final[str] = "caniuse.era"

ALL_VENDORS: Final[str] = "all"
DEFAULT_ERA: Final[str] = "e-2"
ERA_PREFIX: Final[str] = "e"
PREFIXED_FLAG: Final[str] = "x"

DEBUG_ENV_VAR: Final[str] = "CANIPREFIX_DEBUG"

# Can I Use feature sections and the CSS properties, values and at-rules they cover.
CSS_SECTIONS: Final[MappingProxyType[str, tuple[str, ...]]] = MappingProxyType(
    {
        "border-image": ("border-image",),
        "css-boxshadow": ("box-shadow",),
        "css3-boxsizing": ("box-sizing",),
        "multicolumn": (
            "column-width",
            "column-count",
            "columns",
            "column-gap",
            "column-rule-color",
            "column-rule-style",
            "column-rule-width",
            "column-rule",
            "column-span",
            "column-fill",
        ),
        "border-radius": (
            "border-radius",
            "border-top-left-radius",
            "border-top-right-radius",
            "border-bottom-right-radius",
            "border-bottom-left-radius",
        ),
        "transforms2d": ("transform",),
        "css-hyphens": ("hyphens",),
        "css-transitions": (
            "transition",
            "transition-property",
            "transition-duration",
            "transition-timing-function",
            "transition-delay",
        ),
        "font-feature": ("font-feature-settings",),
        "css-animation": (
            "animation",
            "animation-name",
            "animation-duration",
            "animation-timing-function",
            "animation-iteration-count",
            "animation-direction",
            "animation-play-state",
            "animation-delay",
            "animation-fill-mode",
            "@keyframes",
        ),
        "css-gradients": ("linear-gradient",),
        "css-masks": (
            "mask-image",
            "mask-source-type",
            "mask-repeat",
            "mask-position",
            "mask-clip",
            "mask-origin",
            "mask-size",
            "mask",
            "mask-type",
            "mask-box-image-source",
            "mask-box-image-slice",
            "mask-box-image-width",
            "mask-box-image-outset",
            "mask-box-image-repeat",
            "mask-box-image",
            "clip-path",
            "clip-rule",
        ),
        "css-featurequeries": ("@supports",),
        "flexbox": ("flex", "inline-flex", "flex-direction", "flex-wrap", "flex-flow", "order"),
        "calc": ("calc",),
        "object-fit": ("object-fit", "object-position"),
        "css-grid": (
            "grid",
            "inline-grid",
            "grid-template-rows",
            "grid-template-columns",
            "grid-template-areas",
            "grid-template",
            "grid-auto-rows",
            "grid-auto-columns",
            "grid-auto-flow",
            "grid-auto-position",
            "grid-row-start",
            "grid-column-start",
            "grid-row-end",
            "grid-column-end",
            "grid-column",
            "grid-row",
            "grid-area",
            "justify-self",
            "justify-items",
            "align-self",
            "align-items",
        ),
        "css-repeating-gradients": ("repeating-linear-gradient",),
        "css-filters": ("filter",),
        "user-select-none": ("user-select",),
        "intrinsic-width": ("min-content", "max-content", "fit-content", "fill-available"),
        "css3-tabsize": ("tab-size",),
    }
)
