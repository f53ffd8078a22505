"""Colour value type with WCAG 2.0 luminance, alpha compositing and contrast.

A Color holds four channels [r, g, b, a]: r/g/b on the 0-255 scale, a on 0-1.
Channels are not clamped. Accepted inputs:

    Color((255, 255, 255))          # alpha defaults to 1
    Color([0, 0, 0, 0.5])           # any iterable of 3 or 4 numbers, e.g. a numpy row
    Color('transparent')            # [0, 0, 0, 0]
    Color('#cc11cc')  Color('#00000080')
    Color('rgb(255, 255, 255)')  Color('rgba(0, 0, 0, 0.5)')

Anything else raises InvalidColorFormat.

Formulas: http://www.w3.org/TR/2008/REC-WCAG20-20081211/#relativeluminancedef
and http://www.w3.org/TR/2008/REC-WCAG20-20081211/#contrast-ratiodef
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence, Set
from numbers import Real
from typing import Union

from wcag_contrast.core.types import ContrastResult

ColorInput = Union['Color', Iterable[float], str]

_HEX_RE = re.compile(r'#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})?')
_NUM = r'(\d+(?:\.\d*)?|\.\d+)'
_FUNC_RE = re.compile(rf'rgba?\({_NUM}, {_NUM}, {_NUM}(?:, {_NUM})?\)', re.ASCII)


class InvalidColorFormat(ValueError):
    """Raised when a colour literal matches none of the accepted forms."""

    def __init__(self, literal: object, message: str | None = None):
        self.literal = literal
        if message is None:
            kind = 'string' if isinstance(literal, str) else 'colour'
            message = f'Invalid {kind}: {literal}'
        super().__init__(message)


def _linearize(c: float) -> float:
    # c is on the 0-1 scale; the knee value itself takes the linear branch
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: Sequence[float]) -> float:
    """WCAG 2.0 relative luminance of an (r, g, b) triple on the 0-255 scale."""
    r, g, b = (_linearize(c / 255) for c in rgb[:3])
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def _format_channel(value: float) -> str:
    # 255.0 renders as 255, everything else at full precision
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_string(text: str) -> list[float]:
    if text == 'transparent':
        return [0, 0, 0, 0]

    if text.startswith('#'):
        m = _HEX_RE.fullmatch(text)
        if not m:
            raise InvalidColorFormat(text)
        r, g, b, a = m.groups()
        return [int(r, 16), int(g, 16), int(b, 16), int(a, 16) / 255 if a else 1]

    m = _FUNC_RE.fullmatch(text)
    if not m:
        raise InvalidColorFormat(text)
    r, g, b, a = m.groups()
    return [float(r), float(g), float(b), float(a) if a is not None else 1]


def _parse_channels(values: Iterable[float]) -> list[float]:
    # bytes iterate as ints; sets and mappings have no channel order
    if isinstance(values, (bytes, bytearray, memoryview, Set, Mapping)):
        raise InvalidColorFormat(values)
    channels = list(values)
    if len(channels) not in (3, 4) or not all(
        isinstance(c, Real) and not isinstance(c, bool) for c in channels
    ):
        raise InvalidColorFormat(values)
    if len(channels) == 3:
        channels.append(1)
    return channels


class Color:
    """An sRGB colour with straight (non-premultiplied) alpha."""

    __slots__ = ('channels',)

    def __init__(self, value: ColorInput):
        if isinstance(value, Color):
            self.channels: list[float] = list(value.channels)
        elif isinstance(value, str):
            self.channels = _parse_string(value)
        elif isinstance(value, Iterable):
            self.channels = _parse_channels(value)
        else:
            raise InvalidColorFormat(value)

    @property
    def rgb(self) -> list[float]:
        return self.channels[:3]

    @property
    def alpha(self) -> float:
        return self.channels[3]

    @alpha.setter
    def alpha(self, alpha: float) -> None:
        self.channels[3] = alpha

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy with the alpha channel replaced."""
        return Color([*self.rgb, alpha])

    @property
    def luminance(self) -> float:
        return relative_luminance(self.channels)

    @property
    def inverse(self) -> Color:
        r, g, b = self.rgb
        return Color([255 - r, 255 - g, 255 - b, self.alpha])

    def clone(self) -> Color:
        return Color(self)

    def __str__(self) -> str:
        if self.alpha >= 1:
            return 'rgb(' + ', '.join(_format_channel(c) for c in self.rgb) + ')'
        return 'rgba(' + ', '.join(_format_channel(c) for c in self.channels) + ')'

    def __repr__(self) -> str:
        return f'Color({self.channels!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.channels == other.channels

    __hash__ = None  # type: ignore[assignment]

    def overlay_on(self, background: Color) -> Color:
        """Composite this colour over `background` with the source-over operator.

        An opaque colour hides the background completely and is returned as a copy.
        """
        overlaid = self.clone()
        alpha = self.alpha
        if alpha >= 1:
            return overlaid

        bg_alpha = background.alpha
        for i in range(3):
            overlaid.channels[i] = overlaid.channels[i] * alpha + background.channels[i] * bg_alpha * (1 - alpha)
        overlaid.channels[3] = alpha + bg_alpha * (1 - alpha)
        return overlaid

    def contrast(self, other: Color) -> ContrastResult:
        """Contrast ratio between this colour and `other`.

        If this colour is opaque and `other` is translucent, `other` is composited
        over this one first and the ratio is exact.

        If this colour is translucent the backdrop is unknown, so the result is the
        range of ratios achievable over any backdrop between black and white.
        `closest` is an approximation kept for compatibility and is not used for
        `min`; with off-hue colours it can be misleading.
        """
        alpha = self.alpha

        if alpha >= 1:
            if other.alpha < 1:
                other = other.overlay_on(self)

            l1 = self.luminance + 0.05
            l2 = other.luminance + 0.05
            ratio = l1 / l2
            if l2 > l1:
                ratio = 1 / ratio
            return ContrastResult(ratio=ratio, error=0.0, min=ratio, max=ratio)

        on_black = self.overlay_on(Color(_BLACK_CHANNELS))
        on_white = self.overlay_on(Color(_WHITE_CHANNELS))
        contrast_on_black = on_black.contrast(other).ratio
        contrast_on_white = on_white.contrast(other).ratio

        max_ratio = max(contrast_on_black, contrast_on_white)

        other_luminance = other.luminance
        min_ratio = 1.0
        if on_black.luminance > other_luminance:
            min_ratio = contrast_on_black
        elif on_white.luminance < other_luminance:
            min_ratio = contrast_on_white

        closest = Color(
            [min(max(0, (o - c * alpha) / (1 - alpha)), 255) for c, o in zip(self.rgb, other.rgb)]
        )

        return ContrastResult(
            ratio=(min_ratio + max_ratio) / 2,
            error=(max_ratio - min_ratio) / 2,
            min=min_ratio,
            max=max_ratio,
            closest=closest,
            farthest=Color(_WHITE_CHANNELS if contrast_on_white == max_ratio else _BLACK_CHANNELS),
        )


# private backdrops; BLACK and WHITE are reachable by callers and mutable through alpha
_BLACK_CHANNELS = (0, 0, 0, 1)
_WHITE_CHANNELS = (255, 255, 255, 1)

BLACK = Color(_BLACK_CHANNELS)
GRAY = Color([127.5, 127.5, 127.5, 1])
WHITE = Color(_WHITE_CHANNELS)
