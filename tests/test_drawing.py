import pytest

from pdfink.drawing import (
    COLOR_TYPE_FILL_RGB,
    COLOR_TYPE_STROKE_CMYK,
    COLOR_TYPE_STROKE_RGB,
    GRAY_TYPE_FILL,
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
    PaintStyle,
    Polygon,
    Rectangle,
    Rotate,
    RotateReset,
    TextColorCMYK,
    TextColorRGB,
    rotation_matrix,
)

PAGE_H = 841.89


def _numbers(text):
    out = []
    for tok in text.split():
        try:
            out.append(float(tok))
        except ValueError:
            pass
    return out


@pytest.mark.parametrize(
    "kind,expected",
    [("dashed", "[5] 2 d\n"), ("dotted", "[2 3] 11 d\n"), ("solid", "[] 0 d\n"), ("", "[] 0 d\n")],
)
def test_line_type(kind, expected):
    assert LineType(kind).render() == expected


def test_rotate_reset():
    assert RotateReset().render() == "Q\n"


def test_rotation_matrix_zero_angle_round_trip():
    x, y = 100.0, 200.0
    nums = _numbers(rotation_matrix(x, y, 0, PAGE_H))
    assert nums[0] == pytest.approx(1.0)
    assert nums[1] == pytest.approx(0.0)
    assert nums[3] == pytest.approx(1.0)
    assert nums[4] == pytest.approx(x)
    assert nums[5] == pytest.approx(PAGE_H - y, abs=0.01)
    assert nums[-2] == pytest.approx(-x)
    assert nums[-1] == pytest.approx(-(PAGE_H - y), abs=0.01)


def test_rotation_matrix_right_angle():
    nums = _numbers(rotation_matrix(10, 10, 90, PAGE_H))
    assert nums[0] == pytest.approx(0.0, abs=1e-5)
    assert nums[1] == pytest.approx(1.0, abs=1e-5)
    assert nums[2] == pytest.approx(-1.0, abs=1e-5)


def test_rotate_wraps_matrix():
    text = Rotate(PAGE_H, 30, 5, 6).render()
    assert text == "q\n " + rotation_matrix(5, 6, 30, PAGE_H)


def test_rgb_color_components():
    text = ColorRGB(COLOR_TYPE_STROKE_RGB, 255, 0, 51).render()
    assert text.endswith(" RG\n")
    assert _numbers(text) == pytest.approx([1.0, 0.0, 51 / 255], abs=1e-3)


def test_cmyk_color_components():
    text = ColorCMYK(COLOR_TYPE_STROKE_CMYK, 10, 20, 30, 40).render()
    assert text.endswith(" K\n")
    assert _numbers(text) == pytest.approx([0.1, 0.2, 0.3, 0.4])


def test_gray_and_width_round_trip():
    gray = GrayLevel(GRAY_TYPE_FILL, 0.25).render()
    assert gray.endswith(" g\n")
    assert _numbers(gray) == pytest.approx([0.25])
    width = LineWidth(1.5).render()
    assert width.endswith(" w\n")
    assert _numbers(width) == pytest.approx([1.5])


def test_text_colors_equality_and_fill():
    assert TextColorRGB(1, 2, 3) == TextColorRGB(1, 2, 3)
    assert TextColorRGB(1, 2, 3) != TextColorRGB(1, 2, 4)
    assert TextColorRGB(1, 2, 3) != TextColorCMYK(1, 2, 3, 0)
    assert TextColorRGB(255, 0, 2).render() == ColorRGB(COLOR_TYPE_FILL_RGB, 255, 0, 2).render()
    assert TextColorCMYK(0, 6, 14, 0).render().endswith(" k\n")


def test_line_with_ext_states():
    text = Line(PAGE_H, 10, 20, 30, 40, [1, 2]).render()
    lines = text.splitlines()
    assert lines[0] == "q"
    assert lines[1:3] == ["/GS1 gs", "/GS2 gs"]
    assert lines[-1] == "Q"
    assert lines[3].endswith(" l S")
    nums = _numbers(lines[3])
    assert nums == pytest.approx([10, PAGE_H - 20, 30, PAGE_H - 40], abs=0.01)


def test_oval_closes_on_start_point():
    text = Oval(PAGE_H, 10, 20, 110, 80).render()
    lines = text.splitlines()
    assert lines[0].endswith(" m")
    assert lines[-1].endswith(" c S")
    start = _numbers(lines[0])
    end = _numbers(lines[-1])[-2:]
    assert start == end
    assert start[1] == pytest.approx(PAGE_H - 80, abs=0.01)


@pytest.mark.parametrize("style,op", [("F", " f\n"), ("df", " B\n"), (" fd ", " B\n"), ("", " S\n"), ("D", " S\n")])
def test_curve_operator(style, op):
    text = Curve(PAGE_H, 0, 0, 1, 1, 2, 2, 3, 3, style).render()
    assert text.endswith(" c" + op)


@pytest.mark.parametrize("style,end", [("F", " f\n"), ("FD", " b\n"), ("DF", " b\n"), ("D", " s\n")])
def test_polygon_styles(style, end):
    text = Polygon(PAGE_H, [(10, 20), (30, 40), (50, 60)], style, [3]).render()
    assert text.startswith("q\n/GS3 gs\n")
    assert text.endswith(end + "Q\n")
    assert text.count(" m ") == 1
    assert text.count(" l ") == 2


def test_rectangle_default_and_explicit_style():
    default = Rectangle(PAGE_H, 10, 20, 30, 40).render()
    assert default.endswith(" re S\nQ\n")
    empty = Rectangle(PAGE_H, 10, 20, 30, 40, "").render()
    assert empty == default
    filled = Rectangle(PAGE_H, 10, 20, 30, 40, PaintStyle.FILL).render()
    assert filled.endswith(" re f\nQ\n")
    nums = _numbers(filled.splitlines()[1])
    assert nums == pytest.approx([10, PAGE_H - 20, 30, 40], abs=0.01)


def _balanced(text):
    lines = [line.strip() for line in text.split("\n")]
    return lines.count("q") == lines.count("Q")


def test_image_without_mask_is_rotated_and_balanced():
    img = ImageDraw(PAGE_H, 2, 20, 30, 100, 50)
    text = img.render()
    assert text.startswith("q\n " + rotation_matrix(70, 55, 0, PAGE_H))
    assert "/I3 Do" in text
    assert _balanced(text)


def test_image_with_mask_has_no_outer_rotation():
    img = ImageDraw(PAGE_H, 0, 20, 30, 100, 50, with_mask=True)
    text = img.render()
    assert text.startswith("q\n")
    assert " 1 0 0\n" not in text
    assert "/I1 Do" in text
    assert _balanced(text)


def test_image_with_mask_and_angle_includes_matrix():
    img = ImageDraw(PAGE_H, 0, 20, 30, 100, 50, degree_angle=10, mask_angle=5, with_mask=True)
    assert rotation_matrix(70, 55, 15, PAGE_H) in img.render()


def test_image_crop_and_flip():
    img = ImageDraw(
        PAGE_H, 0, 0, 0, 100, 100,
        crop=CropOptions(0, 0, 10, 100),
        horizontal_flip=True,
    )
    text = img.render()
    assert "re W* n\n" in text
    assert "-1 0 0 1 0 0 cm\n" in text
    assert _balanced(text)


def test_imported_template_does_not_accumulate():
    tpl = ImportedTemplate(PAGE_H, "/TPL1", 0.5, 0.5, 10, -300)
    first = tpl.render()
    assert first == tpl.render()
    assert "/TPL1 Do Q Q\n" in first
    nums = _numbers(first)
    assert nums[-2:] == pytest.approx([10, PAGE_H - 300], abs=1e-4)
    assert first.startswith("q 0 J 1 w 0 j 0 G 0 g q ")