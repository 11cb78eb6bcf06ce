"""Text metrics and placement helpers for content streams."""

from __future__ import annotations

import math
from decimal import Decimal

from pdfink.options import Align


def _round_half_away(value: float) -> float:
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def format_float_trim(value: float) -> str:
    """Format ``value`` to at most three decimals, dropping trailing zeros."""
    rounded = _round_half_away(1000.0 * value) / 1000.0
    text = repr(float(rounded))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def convert_typo_unit(value: float, units_per_em: int, font_size: float) -> float:
    """Convert a font design-unit measure to PDF units at ``font_size``."""
    value = value * 1000.0 / float(units_per_em)
    return value * font_size / 1000.0


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def ttf_to_pdf_units(n: int, units_per_em: int) -> int:
    """Convert ``n`` font design units to thousandths of the font size."""
    if n < 0:
        rest = _trunc_mod(n, units_per_em)
        scaled = 1000 * rest
        lead = _trunc_div(rest, scaled) if scaled != 0 else 0
        return -(_trunc_div(-1000 * n, units_per_em) - lead)
    return (n // units_per_em) * 1000 + ((n % units_per_em) * 1000) // units_per_em


def cal_text_height(font_size: int) -> float:
    """Approximate text height for an integer font size."""
    return cal_text_height_precise(float(font_size))


def cal_text_height_precise(font_size: float) -> float:
    """Approximate text height for a fractional font size."""
    return float(font_size) * 0.7


def fix_range(value: float) -> float:
    """Clamp ``value`` into the range 0.0 to 1.0."""
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def cell_text_x(x: float, cell_width: float, text_width: float, align: int) -> float:
    """Horizontal start of text inside a cell for the given alignment."""
    if align & Align.RIGHT:
        return x + cell_width - text_width
    if align & Align.CENTER:
        return x + cell_width * 0.5 - text_width * 0.5
    return x


def cell_text_y(
    page_height: float,
    y: float,
    cell_height: float,
    ascender: float,
    descender: float,
    align: int,
) -> float:
    """Baseline of text inside a cell, in PDF (bottom-up) coordinates.

    ``ascender`` and ``descender`` are typographic metrics already scaled
    to the font size.
    """
    if align & Align.BOTTOM:
        return page_height - y - cell_height - descender
    if align & Align.MIDDLE:
        return page_height - y - cell_height * 0.5 - (descender + ascender) * 0.5
    return page_height - y - ascender


def draw_border(
    x: float,
    y: float,
    cell_width: float,
    cell_height: float,
    page_height: float,
    border: int,
    line_width: float,
) -> str:
    """Return the stroke operators drawing the requested cell borders."""
    offset = line_width * 0.5
    top = page_height - y
    segments = []
    if border & Align.TOP:
        segments.append((x - offset, top, x + cell_width + offset, top))
    if border & Align.LEFT:
        segments.append((x, top, x, top - cell_height))
    if border & Align.RIGHT:
        right = x + cell_width
        segments.append((right, top, right, top - cell_height))
    if border & Align.BOTTOM:
        bottom = top - cell_height
        segments.append((x - offset, bottom, x + cell_width + offset, bottom))
    return "".join(
        f"{x1:.2f} {y1:.2f} m {x2:.2f} {y2:.2f} l s\n" for x1, y1, x2, y2 in segments
    )