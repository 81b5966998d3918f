"""Keys for text-rendering attributes, with their well-known values.

``TextAttribute`` is a closed set: each key exists exactly once and unpickling
resolves back to the same member. Lookups by name reject anything outside the
set.
"""

from __future__ import annotations

from enum import Enum

from .core.errors import InvalidArgumentError


class TextAttribute(Enum):
    BACKGROUND = "background"
    BIDI_EMBEDDING = "bidi_embedding"
    CHAR_REPLACEMENT = "char_replacement"
    FAMILY = "family"
    FONT = "font"
    FOREGROUND = "foreground"
    INPUT_METHOD_HIGHLIGHT = "input method highlight"
    INPUT_METHOD_UNDERLINE = "input method underline"
    JUSTIFICATION = "justification"
    NUMERIC_SHAPING = "numeric_shaping"
    POSTURE = "posture"
    RUN_DIRECTION = "run_direction"
    SIZE = "size"
    STRIKETHROUGH = "strikethrough"
    SUPERSCRIPT = "superscript"
    SWAP_COLORS = "swap_colors"
    TRANSFORM = "transform"
    UNDERLINE = "underline"
    WEIGHT = "weight"
    WIDTH = "width"

    @property
    def key(self) -> str:
        """The attribute's registered name, e.g. ``"input method highlight"``."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> TextAttribute:
        if name is None:
            raise InvalidArgumentError("Attribute name must not be None")
        try:
            return cls(name)
        except ValueError:
            raise InvalidArgumentError(f"Unknown attribute name: {name!r}") from None

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.value})"


# Attribute values

JUSTIFICATION_FULL = 1.0
JUSTIFICATION_NONE = 0.0

POSTURE_REGULAR = 0.0
POSTURE_OBLIQUE = 0.20

RUN_DIRECTION_LTR = False
RUN_DIRECTION_RTL = True

STRIKETHROUGH_ON = True

SUPERSCRIPT_SUB = -1
SUPERSCRIPT_SUPER = 1

SWAP_COLORS_ON = True

UNDERLINE_ON = 0
UNDERLINE_LOW_ONE_PIXEL = 1
UNDERLINE_LOW_TWO_PIXEL = 2
UNDERLINE_LOW_DOTTED = 3
UNDERLINE_LOW_GRAY = 4
UNDERLINE_LOW_DASHED = 5

WEIGHT_EXTRA_LIGHT = 0.5
WEIGHT_LIGHT = 0.75
WEIGHT_DEMILIGHT = 0.875
WEIGHT_REGULAR = 1.0
WEIGHT_SEMIBOLD = 1.25
WEIGHT_MEDIUM = 1.5
WEIGHT_DEMIBOLD = 1.75
WEIGHT_BOLD = 2.0
WEIGHT_HEAVY = 2.25
WEIGHT_EXTRABOLD = 2.5
WEIGHT_ULTRABOLD = 2.75

WIDTH_CONDENSED = 0.75
WIDTH_SEMI_CONDENSED = 0.875
WIDTH_REGULAR = 1.0
WIDTH_SEMI_EXTENDED = 1.25
WIDTH_EXTENDED = 1.5
