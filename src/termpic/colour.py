from __future__ import annotations

from enum import Enum
from typing import Protocol

from termpic.charsets import DEFAULT_RAMP, UPPER_HALF_BLOCK

Colour = tuple[int, int, int]

RESET = "\033[0m"

# Rec. 709 luma weights, scaled so they sum to exactly 10000
_LUMA_WEIGHTS = (2126, 7152, 722)
_LUMA_SCALE = 10000


class RenderMode(Enum):
    HALF_BLOCK = "half"
    FLAT_BLOCK = "block"
    ASCII = "ascii"


def fg(colour: Colour) -> str:
    r, g, b = colour
    return f"\033[38;2;{r};{g};{b}m"


def bg(colour: Colour) -> str:
    r, g, b = colour
    return f"\033[48;2;{r};{g};{b}m"


def luminance(colour: Colour) -> float:
    """Perceptual luminance, 0.2126 R + 0.7152 G + 0.0722 B, in [0, 255]."""
    return sum(w * int(c) for w, c in zip(_LUMA_WEIGHTS, colour)) / _LUMA_SCALE


def ramp_index(colour: Colour, ramp_length: int) -> int:
    """floor(L / 255 * (ramp_length - 1)), computed in integers so white hits the last slot exactly."""
    weighted = sum(w * int(c) for w, c in zip(_LUMA_WEIGHTS, colour))
    return weighted * (ramp_length - 1) // (_LUMA_SCALE * 255)


class Colouriser(Protocol):
    half_block: bool

    def encode(self, top: Colour, bottom: Colour | None = None) -> str:
        """Return the escape sequence and glyph for one cell."""
        ...


class HalfBlockColouriser:
    """Top sample as foreground, bottom sample as background, under an upper half block."""

    half_block = True

    def encode(self, top: Colour, bottom: Colour | None = None) -> str:
        if bottom is None:
            bottom = top
        return f"{fg(top)}{bg(bottom)}{UPPER_HALF_BLOCK}"


class FlatBlockColouriser:
    half_block = False

    def encode(self, top: Colour, bottom: Colour | None = None) -> str:
        return f"{bg(top)} "


class LuminanceColouriser:
    """Picks a ramp character by brightness and leaves the terminal's colours alone."""

    half_block = False

    def __init__(self, ramp: str = DEFAULT_RAMP):
        if not ramp:
            raise ValueError("luminance ramp must contain at least one character")
        self.ramp = ramp

    def encode(self, top: Colour, bottom: Colour | None = None) -> str:
        return self.ramp[ramp_index(top, len(self.ramp))]


def colouriser_for(mode: RenderMode, ramp: str | None = None) -> Colouriser:
    if mode is RenderMode.HALF_BLOCK:
        return HalfBlockColouriser()
    if mode is RenderMode.FLAT_BLOCK:
        return FlatBlockColouriser()
    return LuminanceColouriser(ramp if ramp is not None else DEFAULT_RAMP)
