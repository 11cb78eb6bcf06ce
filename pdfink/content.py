"""A page content stream built from drawing operations."""

from __future__ import annotations

import zlib
from typing import Iterator, List, Optional, Protocol, Sequence, Tuple

from pdfink.drawing import (
    COLOR_TYPE_FILL_CMYK,
    COLOR_TYPE_FILL_RGB,
    COLOR_TYPE_STROKE_CMYK,
    COLOR_TYPE_STROKE_RGB,
    GRAY_TYPE_FILL,
    GRAY_TYPE_STROKE,
    ColorCMYK,
    ColorRGB,
    CropOptions,
    Curve,
    GrayLevel,
    ImageDraw,
    ImportedTemplate,
    Line,
    LineType,
    LineWidth,
    Oval,
    Polygon,
    Rectangle,
    Rotate,
    RotateReset,
)
from pdfink.metrics import fix_range


class Renderable(Protocol):
    def render(self) -> str: ...


class ContentStream:
    """An ordered list of drawing operations for one page.

    Coordinates are given from the top-left of the page; ``page_height``
    is used to flip them into PDF space. ``compress_level`` follows zlib:
    0 stores the stream uncompressed.
    """

    def __init__(self, page_height: float, compress_level: int = zlib.Z_DEFAULT_COMPRESSION) -> None:
        self.page_height = page_height
        self.compress_level = compress_level
        self.items: List[Renderable] = []

    def __iter__(self) -> Iterator[Renderable]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def append(self, item: Renderable) -> None:
        """Add any object with a ``render()`` method."""
        self.items.append(item)

    def add_line(self, x1: float, y1: float, x2: float, y2: float,
                 ext_g_state_indexes: Sequence[int] = ()) -> None:
        self.append(Line(self.page_height, x1, y1, x2, y2, list(ext_g_state_indexes)))

    def add_oval(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.append(Oval(self.page_height, x1, y1, x2, y2))

    def add_curve(self, x0: float, y0: float, x1: float, y1: float, x2: float, y2: float,
                  x3: float, y3: float, style: str = "") -> None:
        self.append(Curve(self.page_height, x0, y0, x1, y1, x2, y2, x3, y3,
                          style.strip().upper()))

    def add_polygon(self, points: Sequence[Tuple[float, float]], style: str = "",
                    ext_g_state_indexes: Sequence[int] = ()) -> None:
        self.append(Polygon(self.page_height, list(points), style, list(ext_g_state_indexes)))

    def add_rectangle(self, x: float, y: float, width: float, height: float, style: str = "",
                      ext_g_state_indexes: Sequence[int] = ()) -> None:
        self.append(Rectangle(self.page_height, x, y, width, height, style,
                              list(ext_g_state_indexes)))

    def add_image(
        self,
        index: int,
        x: float,
        y: float,
        width: float,
        height: float,
        degree_angle: float = 0.0,
        mask_angle: float = 0.0,
        with_mask: bool = False,
        crop: Optional[CropOptions] = None,
        vertical_flip: bool = False,
        horizontal_flip: bool = False,
        ext_g_state_indexes: Sequence[int] = (),
    ) -> None:
        self.append(ImageDraw(
            page_height=self.page_height,
            index=index,
            x=x,
            y=y,
            width=width,
            height=height,
            degree_angle=degree_angle,
            mask_angle=mask_angle,
            with_mask=with_mask,
            crop=crop,
            vertical_flip=vertical_flip,
            horizontal_flip=horizontal_flip,
            ext_g_state_indexes=list(ext_g_state_indexes),
        ))

    def add_imported_template(self, name: str, scale_x: float, scale_y: float,
                              tx: float, ty: float) -> None:
        self.append(ImportedTemplate(self.page_height, name, scale_x, scale_y, tx, ty))

    def set_line_width(self, width: float) -> None:
        self.append(LineWidth(width))

    def set_line_type(self, line_type: str) -> None:
        """Set the dash pattern: ``"solid"``, ``"dashed"`` or ``"dotted"``."""
        self.append(LineType(line_type))

    def set_gray_fill(self, level: float) -> None:
        self.append(GrayLevel(GRAY_TYPE_FILL, fix_range(level)))

    def set_gray_stroke(self, level: float) -> None:
        self.append(GrayLevel(GRAY_TYPE_STROKE, fix_range(level)))

    def set_stroke_color(self, r: int, g: int, b: int) -> None:
        self.append(ColorRGB(COLOR_TYPE_STROKE_RGB, r, g, b))

    def set_fill_color(self, r: int, g: int, b: int) -> None:
        self.append(ColorRGB(COLOR_TYPE_FILL_RGB, r, g, b))

    def set_stroke_color_cmyk(self, c: int, m: int, y: int, k: int) -> None:
        self.append(ColorCMYK(COLOR_TYPE_STROKE_CMYK, c, m, y, k))

    def set_fill_color_cmyk(self, c: int, m: int, y: int, k: int) -> None:
        self.append(ColorCMYK(COLOR_TYPE_FILL_CMYK, c, m, y, k))

    def rotate(self, angle: float, x: float, y: float) -> None:
        """Save the graphics state and rotate around ``(x, y)``."""
        self.append(Rotate(self.page_height, angle, x, y))

    def reset_rotation(self) -> None:
        """Restore the state saved by the matching :meth:`rotate`."""
        self.append(RotateReset())

    def render(self) -> str:
        """The uncompressed content-stream text."""
        return "".join(item.render() for item in self.items)

    def to_object(self) -> bytes:
        """The stream as a PDF object body, compressed unless level is 0."""
        data = self.render().encode("latin-1")
        flate = self.compress_level != 0
        if flate:
            data = zlib.compress(data, self.compress_level)
        header = "<<\n"
        if flate:
            header += "/Filter/FlateDecode"
        header += f"/Length {len(data)}\n>>\nstream\n"
        tail = b"\nendstream\n" if flate else b"endstream\n"
        return header.encode("ascii") + data + tail