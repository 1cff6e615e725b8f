"""Closed vocabulary of SVG element tags.

Each ``TagName`` member's value is the name written into the markup. The
tag also carries the structural rules the tree model and the serializer
enforce: whether an element may hold children and whether it carries text.
"""

from enum import Enum
from typing import FrozenSet


class TagName(Enum):
    """SVG element kinds."""

    A = "a"
    ANIMATE = "animate"
    ANIMATE_MOTION = "animateMotion"
    ANIMATE_TRANSFORM = "animateTransform"
    CIRCLE = "circle"
    CLIP_PATH = "clipPath"
    COLOR_PROFILE = "color-profile"
    DEFS = "defs"
    DESC = "desc"
    DISCARD = "discard"
    ELLIPSE = "ellipse"
    FE_BLEND = "feBlend"
    FE_COLOR_MATRIX = "feColorMatrix"
    FE_COMPONENT_TRANSFER = "feComponentTransfer"
    FE_COMPOSITE = "feComposite"
    FE_CONVOLVE_MATRIX = "feConvolveMatrix"
    FE_DIFFUSE_LIGHTING = "feDiffuseLighting"
    FE_DISPLACEMENT_MAP = "feDisplacementMap"
    FE_DISTANT_LIGHT = "feDistantLight"
    FE_DROP_SHADOW = "feDropShadow"
    FE_FLOOD = "feFlood"
    FE_FUNC_A = "feFuncA"
    FE_FUNC_B = "feFuncB"
    FE_FUNC_G = "feFuncG"
    FE_FUNC_R = "feFuncR"
    FE_GAUSSIAN_BLUR = "feGaussianBlur"
    FE_IMAGE = "feImage"
    FE_MERGE = "feMerge"
    FE_MERGE_NODE = "feMergeNode"
    FE_MORPHOLOGY = "feMorphology"
    FE_OFFSET = "feOffset"
    FE_POINT_LIGHT = "fePointLight"
    FE_SPECULAR_LIGHTING = "feSpecularLighting"
    FE_SPOT_LIGHT = "feSpotLight"
    FE_TILE = "feTile"
    FE_TURBULENCE = "feTurbulence"
    FILTER = "filter"
    FOREIGN_OBJECT = "foreignObject"
    G = "g"
    HATCH = "hatch"
    HATCHPATH = "hatchpath"
    IMAGE = "image"
    LINE = "line"
    LINEAR_GRADIENT = "linearGradient"
    MARKER = "marker"
    MASK = "mask"
    MESH = "mesh"
    MESHGRADIENT = "meshgradient"
    MESHPATCH = "meshpatch"
    MESHROW = "meshrow"
    METADATA = "metadata"
    MPATH = "mpath"
    PATH = "path"
    PATTERN = "pattern"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    RADIAL_GRADIENT = "radialGradient"
    RECT = "rect"
    SCRIPT = "script"
    SET = "set"
    SOLIDCOLOR = "solidcolor"
    STOP = "stop"
    STYLE = "style"
    SVG = "svg"
    SWITCH = "switch"
    SYMBOL = "symbol"
    TEXT = "text"
    TEXT_PATH = "textPath"
    TITLE = "title"
    TSPAN = "tspan"
    UNKNOWN = "unknown"
    USE = "use"
    VIEW = "view"

    @property
    def is_childless(self) -> bool:
        """Check if elements with this tag may never hold children."""
        return self in _CHILDLESS_TAGS

    @property
    def is_container(self) -> bool:
        """Check if elements with this tag may hold children."""
        return not self.is_childless

    @classmethod
    def from_name(cls, name: str) -> "TagName":
        """Look up a tag by its markup name.

        Unrecognised names map to ``TagName.UNKNOWN`` rather than raising.
        """
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


_CHILDLESS_TAGS: FrozenSet[TagName] = frozenset({
    TagName.CIRCLE,
    TagName.ELLIPSE,
    TagName.FE_DISTANT_LIGHT,
    TagName.FE_FUNC_A,
    TagName.FE_FUNC_B,
    TagName.FE_FUNC_G,
    TagName.FE_FUNC_R,
    TagName.FE_MERGE_NODE,
    TagName.FE_POINT_LIGHT,
    TagName.FE_SPOT_LIGHT,
    TagName.IMAGE,
    TagName.LINE,
    TagName.MPATH,
    TagName.PATH,
    TagName.POLYGON,
    TagName.POLYLINE,
    TagName.RECT,
    TagName.STOP,
    TagName.USE,
})
