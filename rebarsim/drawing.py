"""Raster drawings of a designed girder: cross-section and longitudinal section."""

from __future__ import annotations

from collections.abc import Iterator

from PIL import Image, ImageDraw, ImageFont

from .design import CONCRETE_COVER, ROW_CLEAR_SPACING, STIRRUP_DIAMETER, RebarCalc

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
CONCRETE_GREY: Color = (211, 211, 211)
STIRRUP_GREY: Color = (128, 128, 128)
BENT_REBAR_COLOR: Color = (255, 0, 0)
FAILURE_COLOR: Color = (255, 0, 0)

REBAR_COLORS: dict[float, Color] = {
    14.0: (0, 0, 255),
    16.0: (0, 128, 0),
    18.0: (255, 255, 0),
    20.0: (255, 165, 0),
    22.0: (255, 0, 255),
    25.0: (128, 0, 128),
    28.0: (165, 42, 42),
}

CROSS_SECTION_SIZE = (600, 600)
LONGITUDINAL_SIZE = (1200, 400)


def _rebar_color(diameter: float) -> Color:
    try:
        return REBAR_COLORS[diameter]
    except KeyError:
        raise ValueError(f"no colour defined for bar diameter {diameter:g} mm") from None


def _put_text(draw: ImageDraw.ImageDraw, text: str, origin: tuple[float, float], fill: Color) -> None:
    """Draw ``text`` with ``origin`` at its bottom-left corner."""
    font = ImageFont.load_default()
    _, _, _, bottom = draw.multiline_textbbox((0, 0), text, font=font)
    x, y = origin
    draw.multiline_text((int(x), int(y) - bottom), text, fill=fill, font=font)


def _draw_failure(draw: ImageDraw.ImageDraw, message: str, img_h: int) -> None:
    _put_text(draw, "DESIGN FAILED", (50, img_h // 2 - 20), FAILURE_COLOR)
    _put_text(draw, message, (50, img_h // 2 + 20), BLACK)


def _row_positions(count: int, x_start: float, x_end: float) -> Iterator[float]:
    if count == 1:
        yield x_start + 0.5 * (x_end - x_start)
        return
    for i in range(count):
        yield x_start + i / (count - 1) * (x_end - x_start)


def _draw_row(
    draw: ImageDraw.ImageDraw,
    count: int,
    x_start: float,
    x_end: float,
    y: float,
    radius: float,
    color: Color,
) -> None:
    r = int(radius)
    cy = int(y)
    for x in _row_positions(count, x_start, x_end):
        cx = int(x)
        draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=color)


def cross_section_image(calc: RebarCalc) -> Image.Image:
    """Draw the girder cross-section with its bar layout as a 600x600 RGB image."""
    img_w, img_h = CROSS_SECTION_SIZE
    image = Image.new("RGB", (img_w, img_h), WHITE)
    draw = ImageDraw.Draw(image)
    design, params = calc.design, calc.params

    if not design.design_possible:
        _draw_failure(draw, design.error_message, img_h)
        return image
    if params.width <= 0 or params.height <= 0:
        raise ValueError("no design has been run")

    scale = min(img_w * 0.8 / params.width, img_h * 0.8 / params.height)
    rect_w = int(params.width * scale)
    rect_h = int(params.height * scale)
    rect_x = (img_w - rect_w) // 2
    rect_y = (img_h - rect_h) // 2

    draw.rectangle([rect_x, rect_y, rect_x + rect_w, rect_y + rect_h], fill=CONCRETE_GREY)
    offset = CONCRETE_COVER * scale
    draw.rectangle(
        [
            int(rect_x + offset),
            int(rect_y + offset),
            int(rect_x + rect_w - offset),
            int(rect_y + rect_h - offset),
        ],
        outline=BLACK,
        width=2,
    )

    radius = design.flexure_rebar_diameter / 2.0 * scale
    color = _rebar_color(design.flexure_rebar_diameter)
    inset = offset + STIRRUP_DIAMETER * scale + radius
    x_start = rect_x + inset
    x_end = rect_x + rect_w - inset
    label_x = rect_x + rect_w + 10
    diameter_label = f"d{int(design.flexure_rebar_diameter)}"

    straight_row1 = design.rebar_count_row1 - design.bent_rebar_count
    row2 = design.rebar_count_row2 if design.rebar_rows > 1 else 0
    bottom_count = max(straight_row1, row2)
    second_count = min(straight_row1, row2)
    y_bottom = rect_y + rect_h - inset

    if bottom_count > 0:
        _draw_row(draw, bottom_count, x_start, x_end, y_bottom, radius, color)
        _put_text(draw, f"{bottom_count} x {diameter_label}", (label_x, y_bottom + 5), BLACK)

    if second_count > 0:
        y_second = y_bottom - radius * 2 - ROW_CLEAR_SPACING * scale
        _draw_row(draw, second_count, x_start, x_end, y_second, radius, color)
        _put_text(draw, f"{second_count} x {diameter_label}", (label_x, y_second + 5), BLACK)

    if design.bent_rebars_used and design.bent_rebar_count > 0:
        y_top = rect_y + inset
        _draw_row(draw, design.bent_rebar_count, x_start, x_end, y_top, radius, BENT_REBAR_COLOR)
        _put_text(
            draw,
            f"{design.bent_rebar_count} x {diameter_label} (Bent)",
            (label_x, y_top + 5),
            BLACK,
        )

    _put_text(draw, f"{int(params.width)}mm", (rect_x, rect_y - 20), BLACK)
    _put_text(draw, f"{int(params.height)}mm", (rect_x - 100, rect_y + rect_h // 2), BLACK)
    return image


def longitudinal_section_image(calc: RebarCalc) -> Image.Image:
    """Draw the girder along its span with stirrups and bars as a 1200x400 RGB image."""
    img_w, img_h = LONGITUDINAL_SIZE
    image = Image.new("RGB", (img_w, img_h), WHITE)
    draw = ImageDraw.Draw(image)
    design, params = calc.design, calc.params

    if params.span <= 0 or params.height <= 0:
        return image
    if not design.design_possible:
        _draw_failure(draw, design.error_message, img_h)
        return image

    scale_x = img_w * 0.9 / params.span
    scale_y = img_h * 0.6 / params.height
    rect_w = int(params.span * scale_x)
    rect_h = int(params.height * scale_y)
    rect_x = (img_w - rect_w) // 2
    rect_y = (img_h - rect_h) // 2
    box = [rect_x, rect_y, rect_x + rect_w, rect_y + rect_h]

    draw.rectangle(box, fill=CONCRETE_GREY)
    draw.rectangle(box, outline=BLACK, width=1)

    if design.stirrup_spacing > 0:
        x_mm = design.stirrup_spacing
        while x_mm < params.span:
            x = int(rect_x + x_mm * scale_x)
            draw.line([(x, rect_y), (x, rect_y + rect_h)], fill=STIRRUP_GREY, width=1)
            x_mm += design.stirrup_spacing

    y_row1 = (
        rect_y
        + rect_h
        - CONCRETE_COVER * scale_y
        - STIRRUP_DIAMETER * scale_y
        - design.flexure_rebar_diameter / 2.0 * scale_y
    )
    y_row2 = y_row1 - design.flexure_rebar_diameter * scale_y - ROW_CLEAR_SPACING * scale_y
    y_top = rect_y + CONCRETE_COVER * scale_y + STIRRUP_DIAMETER * scale_y
    color = _rebar_color(design.flexure_rebar_diameter)

    if design.rebar_count_row2 > 0:
        draw.line([(rect_x, int(y_row2)), (rect_x + rect_w, int(y_row2))], fill=color, width=2)

    bent_count = design.bent_rebar_count if design.bent_rebars_used else 0
    if design.rebar_count_row1 - bent_count > 0:
        draw.line([(rect_x, int(y_row1)), (rect_x + rect_w, int(y_row1))], fill=color, width=2)

    if bent_count > 0:
        left_x = rect_x + rect_w // 4
        right_x = rect_x + rect_w * 3 // 4
        delta = y_row1 - y_top
        bottom_left = (left_x, int(y_row1))
        top_left = (int(left_x - delta), int(y_top))
        bottom_right = (right_x, int(y_row1))
        top_right = (int(right_x + delta), int(y_top))
        path = [
            (rect_x, int(y_top)),
            top_left,
            bottom_left,
            bottom_right,
            top_right,
            (rect_x + rect_w, int(y_top)),
        ]
        for start, end in zip(path, path[1:]):
            draw.line([start, end], fill=BENT_REBAR_COLOR, width=3)

    return image