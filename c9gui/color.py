"""Packed 0xRRGGBBAA colours, blending and dithered gradients."""

from __future__ import annotations

from dataclasses import dataclass


def red(color: int) -> int:
    """Red channel of a packed colour."""
    return (color >> 24) & 0xFF


def green(color: int) -> int:
    """Green channel of a packed colour."""
    return (color >> 16) & 0xFF


def blue(color: int) -> int:
    """Blue channel of a packed colour."""
    return (color >> 8) & 0xFF


def alpha(color: int) -> int:
    """Alpha channel of a packed colour."""
    return color & 0xFF


def set_alpha(color: int, value: int) -> int:
    """Return the colour with its alpha channel replaced."""
    return (color & 0xFFFFFF00) | (value & 0xFF)


def rgba_from_u8(r: int, g: int, b: int, a: int) -> int:
    """Pack four channel values into one colour."""
    return ((r & 0xFF) << 24) | ((g & 0xFF) << 16) | ((b & 0xFF) << 8) | (a & 0xFF)


def blend_colors(color_1: int, color_2: int) -> int:
    """Composite ``color_1`` over ``color_2`` using the alpha of ``color_1``."""
    if alpha(color_1) == 0:
        return color_2
    if alpha(color_2) == 0:
        return color_1
    a_1 = alpha(color_1)
    inverse = 255 - a_1

    def mix(c_1: int, c_2: int) -> int:
        return (a_1 * c_1 + inverse * c_2) // 255

    return rgba_from_u8(
        mix(red(color_1), red(color_2)),
        mix(green(color_1), green(color_2)),
        mix(blue(color_1), blue(color_2)),
        a_1 + inverse * alpha(color_2) // 255,
    )


def blend_alpha(base_color: int, overlay_color: int, value: int) -> int:
    """Blend the overlay colour onto an opaque base with the given alpha (0-255)."""
    if base_color == 0:
        return set_alpha(overlay_color, value)
    inverse = 255 - value

    def mix(base: int, overlay: int) -> int:
        return (value * overlay + inverse * base) // 255

    return rgba_from_u8(
        mix(red(base_color), red(overlay_color)),
        mix(green(base_color), green(overlay_color)),
        mix(blue(base_color), blue(overlay_color)),
        255,
    )


@dataclass(frozen=True)
class Gradient:
    """A two-colour gradient running between ``start_at`` and ``end_at`` (0 to 1)."""

    start_color: int
    end_color: int
    start_at: float = 0.0
    end_at: float = 0.0


def get_dither_spread(gradient: Gradient) -> float:
    """Amount of dithering to apply so the gradient shows no banding."""
    span = gradient.end_at - gradient.start_at
    if span <= 0:
        span = 1.0
    start, end = gradient.start_color, gradient.end_color
    total = int(
        0.299 * abs(red(start) - red(end))
        + 0.587 * abs(green(start) - green(end))
        + 0.114 * abs(blue(start) - blue(end))
    )
    if total != 0:
        return span / total
    return 0.0


def get_dithered_gradient_color(
    gradient: Gradient, position: float, random_variation: float
) -> int:
    """Colour of the gradient at ``position`` shifted by ``random_variation``."""
    start_at = gradient.start_at
    end_at = gradient.end_at or 1.0
    if position < start_at:
        return gradient.start_color
    if position > end_at:
        return gradient.end_color

    normalized = (position + random_variation - start_at) / (end_at - start_at)
    normalized = min(max(normalized, 0.0), 1.0)

    def channel(get) -> int:
        start = get(gradient.start_color)
        end = get(gradient.end_color)
        return int(start + (end - start) * normalized)

    return rgba_from_u8(channel(red), channel(green), channel(blue), 0xFF)