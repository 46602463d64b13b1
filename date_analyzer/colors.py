"""Deterministic colours derived from date components"""
from .models import ColorPair

# (saturation factor, saturation offset, lightness factor, lightness offset)
HSL_MMDDYY = (3, 30, 2, 40)
HSL_DDMMYY = (4, 25, 3, 35)


def _clamp(low: int, high: int, value: int) -> int:
    return max(low, min(high, value))


def generate_hex(a: int, b: int, yy: int) -> str:
    """Hex colour: red from ``a``, green from ``b``, blue from the two-digit year"""
    red = 80 + (a * 7) % 120
    green = 60 + (b * 13) % 140
    blue = 70 + ((yy % 100) * 2) % 130
    return f"#{red:02x}{green:02x}{blue:02x}"


def generate_hsl(a: int, b: int, year: int,
                 sat_k: int, sat_c: int, light_k: int, light_c: int) -> str:
    hue = (a * b + year) % 360
    saturation = _clamp(40, 90, a * sat_k + sat_c)
    lightness = _clamp(35, 75, b * light_k + light_c)
    return f"hsl({hue}, {saturation}%, {lightness}%)"


def hex_colors(day: int, month: int, year: int) -> ColorPair:
    yy = year % 100
    return ColorPair(
        mmddyy=generate_hex(month, day, yy),
        ddmmyy=generate_hex(day, month, yy),
    )


def hsl_colors(day: int, month: int, year: int) -> ColorPair:
    return ColorPair(
        mmddyy=generate_hsl(month, day, year, *HSL_MMDDYY),
        ddmmyy=generate_hsl(day, month, year, *HSL_DDMMYY),
    )
