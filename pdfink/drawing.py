"""Drawing operations that render themselves as PDF content-stream text."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

COLOR_TYPE_STROKE_RGB = "RG"
COLOR_TYPE_FILL_RGB = "rg"
COLOR_TYPE_STROKE_CMYK = "K"
COLOR_TYPE_FILL_CMYK = "k"
GRAY_TYPE_FILL = "g"
GRAY_TYPE_STROKE = "G"


def _gs_lines(indexes: Sequence[int]) -> str:
    return "".join(f"/GS{index} gs\n" for index in indexes)


def rotation_matrix(x: float, y: float, degree_angle: float, page_height: float) -> str:
    """Return the operators rotating the drawing space around ``(x, y)``."""
    radians = math.radians(degree_angle)
    c = math.cos(radians)
    s = math.sin(radians)
    cy = page_height - y
    return (
        f"{c:.5f} {s:.5f} {-s:.5f}\n {c:.5f} {x:.2f} {cy:.2f} cm\n"
        f" 1 0 0\n 1 {-x:.2f} {-cy:.2f} cm\n"
    )


class PaintStyle(str, Enum):
    """How a closed shape is painted."""

    DRAW = "S"
    FILL = "f"
    DRAW_FILL = "B"


@dataclass(frozen=True)
class ColorRGB:
    """Set an RGB stroke (``RG``) or fill (``rg``) colour."""

    color_type: str
    r: int
    g: int
    b: int

    def render(self) -> str:
        return f"{self.r / 255:.3f} {self.g / 255:.3f} {self.b / 255:.3f} {self.color_type}\n"


@dataclass(frozen=True)
class ColorCMYK:
    """Set a CMYK stroke (``K``) or fill (``k``) colour, components in percent."""

    color_type: str
    c: int
    m: int
    y: int
    k: int

    def render(self) -> str:
        return (
            f"{self.c / 100:.2f} {self.m / 100:.2f} {self.y / 100:.2f} "
            f"{self.k / 100:.2f} {self.color_type}\n"
        )


@dataclass(frozen=True)
class GrayLevel:
    """Set a gray stroke (``G``) or fill (``g``) level."""

    gray_type: str
    scale: float

    def render(self) -> str:
        return f"{self.scale:.2f} {self.gray_type}\n"


@dataclass(frozen=True)
class LineWidth:
    """Set the stroke width."""

    width: float

    def render(self) -> str:
        return f"{self.width:.2f} w\n"


@dataclass(frozen=True)
class LineType:
    """Set the dash pattern: ``"dashed"``, ``"dotted"`` or anything else for solid."""

    line_type: str

    def render(self) -> str:
        if self.line_type == "dashed":
            return "[5] 2 d\n"
        if self.line_type == "dotted":
            return "[2 3] 11 d\n"
        return "[] 0 d\n"


@dataclass
class Line:
    """A straight line between two points in top-left page coordinates."""

    page_height: float
    x1: float
    y1: float
    x2: float
    y2: float
    ext_g_state_indexes: list[int] = field(default_factory=list)

    def render(self) -> str:
        h = self.page_height
        return (
            "q\n"
            + _gs_lines(self.ext_g_state_indexes)
            + f"{self.x1:.2f} {h - self.y1:.2f} m {self.x2:.2f} {h - self.y2:.2f} l S\n"
            + "Q\n"
        )


@dataclass
class Oval:
    """An ellipse inscribed in the box from ``(x1, y1)`` to ``(x2, y2)``."""

    page_height: float
    x1: float
    y1: float
    x2: float
    y2: float

    def render(self) -> str:
        h, x1, y1, x2, y2 = self.page_height, self.x1, self.y1, self.x2, self.y2
        cp = 0.55228  # control point magnification
        dx = (x2 - x1) / 2 * cp
        dy = (y2 - y1) / 2 * cp
        bottom = (x1 + (x2 - x1) / 2, h - y2)
        right = (x2, h - (y1 + (y2 - y1) / 2))
        top = (x1 + (x2 - x1) / 2, h - y1)
        left = (x1, h - (y1 + (y2 - y1) / 2))

        def seg(*values: float) -> str:
            return " ".join(f"{v:.2f}" for v in values)

        return (
            f"{seg(*bottom)} m\n"
            f"{seg(bottom[0] + dx, bottom[1], right[0], right[1] - dy, *right)} c\n"
            f"{seg(right[0], right[1] + dy, top[0] + dx, top[1], *top)} c\n"
            f"{seg(top[0] - dx, top[1], left[0], left[1] + dy, *left)} c\n"
            f"{seg(left[0], left[1] - dy, bottom[0] - dx, bottom[1], *bottom)} c S\n"
        )


@dataclass
class Curve:
    """A cubic Bézier curve; style is ``D``, ``F`` or ``DF``/``FD``."""

    page_height: float
    x0: float
    y0: float
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float
    style: str = ""

    def render(self) -> str:
        h = self.page_height
        style = self.style.strip().upper()
        if style == "F":
            op = "f"
        elif style in ("FD", "DF"):
            op = "B"
        else:
            op = "S"
        return (
            f"{self.x0:.2f} {h - self.y0:.2f} m\n"
            f"{self.x1:.2f} {h - self.y1:.2f} {self.x2:.2f} {h - self.y2:.2f} "
            f"{self.x3:.2f} {h - self.y3:.2f} c {op}\n"
        )


@dataclass
class Polygon:
    """A closed polygon through ``points`` given as ``(x, y)`` pairs."""

    page_height: float
    points: Sequence[Tuple[float, float]]
    style: str = ""
    ext_g_state_indexes: list[int] = field(default_factory=list)

    def render(self) -> str:
        parts = ["q\n", _gs_lines(self.ext_g_state_indexes)]
        for i, (x, y) in enumerate(self.points):
            parts.append(f"{x:.2f} {self.page_height - y:.2f}")
            parts.append(" m " if i == 0 else " l ")
        if self.style == "F":
            parts.append(" f\n")
        elif self.style in ("FD", "DF"):
            parts.append(" b\n")
        else:
            parts.append(" s\n")
        parts.append("Q\n")
        return "".join(parts)


@dataclass
class Rectangle:
    """An axis-aligned rectangle."""

    page_height: float
    x: float
    y: float
    width: float
    height: float
    style: Union[PaintStyle, str] = PaintStyle.DRAW
    ext_g_state_indexes: list[int] = field(default_factory=list)

    def render(self) -> str:
        style = self.style.value if isinstance(self.style, PaintStyle) else self.style
        if not style:
            style = PaintStyle.DRAW.value
        return (
            "q\n"
            + _gs_lines(self.ext_g_state_indexes)
            + f"{self.x:.2f} {self.page_height - self.y:.2f} "
            f"{self.width:.2f} {self.height:.2f} re {style}\n"
            + "Q\n"
        )


@dataclass
class Rotate:
    """Save the graphics state and rotate around ``(x, y)``."""

    page_height: float
    angle: float
    x: float
    y: float

    def render(self) -> str:
        return "q\n " + rotation_matrix(self.x, self.y, self.angle, self.page_height)


@dataclass(frozen=True)
class RotateReset:
    """Restore the graphics state saved by :class:`Rotate`."""

    def render(self) -> str:
        return "Q\n"


@dataclass(frozen=True)
class CropOptions:
    """The visible part of an image, relative to its top-left corner."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class ImageDraw:
    """Place image XObject ``/I<index+1>`` on the page."""

    page_height: float
    index: int
    x: float
    y: float
    width: float
    height: float
    degree_angle: float = 0.0
    mask_angle: float = 0.0
    with_mask: bool = False
    crop: Optional[CropOptions] = None
    vertical_flip: bool = False
    horizontal_flip: bool = False
    ext_g_state_indexes: list[int] = field(default_factory=list)

    def _open_rotation(self) -> str:
        w, h = self.width, self.height
        if self.crop is not None:
            w, h = self.crop.width, self.crop.height
        return Rotate(self.page_height, self.degree_angle, self.x + w / 2, self.y + h / 2).render()

    def _mask_rotation(self) -> str:
        angle = self.mask_angle + self.degree_angle
        if angle == 0:
            return ""
        return rotation_matrix(
            self.x + self.width / 2, self.y + self.height / 2, angle, self.page_height
        )

    def render(self) -> str:
        width, height = self.width, self.height
        parts = []
        if not self.with_mask:
            parts.append(self._open_rotation())

        parts.append("q\n")
        parts.append(_gs_lines(self.ext_g_state_indexes))

        if self.horizontal_flip or self.vertical_flip:
            fh = "-1" if self.horizontal_flip else "1"
            fv = "-1" if self.vertical_flip else "1"
            parts.append(f"{fh} 0 0 {fv} 0 0 cm\n")

        x = self.x
        y = self.page_height - self.y
        crop = self.crop
        if crop is not None:
            clip_x = -x - crop.width if self.horizontal_flip else x
            clip_y = y - crop.height
            if self.vertical_flip:
                clip_y = -clip_y - crop.height
            parts.append(
                f"{clip_x:.2f} {clip_y:.2f} {crop.width:.2f} {crop.height:.2f} re W* n\n"
            )
            x -= crop.x
            if self.horizontal_flip:
                x = -x - width
            y += crop.y - height
            if self.vertical_flip:
                y = -y - height
        else:
            y -= height
            if self.horizontal_flip:
                x = -x - width
            if self.vertical_flip:
                y = -y - height

        mask_matrix = self._mask_rotation() if self.with_mask else ""
        parts.append(
            f"q\n {mask_matrix} {width:.2f} 0 0\n {height:.2f} {x:.2f} {y:.2f} cm "
            f"/I{self.index + 1} Do \nQ\n"
        )
        parts.append("Q\n")

        if not self.with_mask:
            parts.append(RotateReset().render())
        return "".join(parts)


@dataclass(frozen=True)
class ImportedTemplate:
    """Draw an imported page template, scaled and translated."""

    page_height: float
    name: str
    scale_x: float
    scale_y: float
    tx: float
    ty: float

    def render(self) -> str:
        ty = self.ty + self.page_height
        return (
            f"q 0 J 1 w 0 j 0 G 0 g q {self.scale_x:.4f} 0 0 {self.scale_y:.4f} "
            f"{self.tx:.4f} {ty:.4f} cm {self.name} Do Q Q\n"
        )


@dataclass(frozen=True)
class TextColorRGB:
    """An RGB fill colour used for text."""

    r: int
    g: int
    b: int

    def render(self) -> str:
        return ColorRGB(COLOR_TYPE_FILL_RGB, self.r, self.g, self.b).render()


@dataclass(frozen=True)
class TextColorCMYK:
    """A CMYK fill colour used for text, components in percent."""

    c: int
    m: int
    y: int
    k: int

    def render(self) -> str:
        return ColorCMYK(COLOR_TYPE_FILL_CMYK, self.c, self.m, self.y, self.k).render()