import pytest

from rebarsim.design import RebarCalc
from rebarsim.drawing import (
    BENT_REBAR_COLOR,
    CONCRETE_GREY,
    CROSS_SECTION_SIZE,
    LONGITUDINAL_SIZE,
    REBAR_COLORS,
    STIRRUP_GREY,
    WHITE,
    cross_section_image,
    longitudinal_section_image,
)


def _colors(image):
    return {color for _, color in image.getcolors(maxcolors=image.width * image.height)}


@pytest.fixture
def designed():
    calc = RebarCalc()
    assert calc.run_design(10000, 600, 1000, 300, 1.8, 2000) is True
    return calc


@pytest.fixture
def failed():
    calc = RebarCalc()
    assert calc.run_design(10000, 50, 1000, 300, 1.8, 2000) is False
    return calc


def test_cross_section_size(designed):
    assert cross_section_image(designed).size == CROSS_SECTION_SIZE


def test_longitudinal_size(designed):
    assert longitudinal_section_image(designed).size == LONGITUDINAL_SIZE


def test_cross_section_centre_is_concrete(designed):
    image = cross_section_image(designed)
    assert image.getpixel((300, 300)) == CONCRETE_GREY


def test_cross_section_uses_bar_colour(designed):
    image = cross_section_image(designed)
    expected = REBAR_COLORS[designed.design.flexure_rebar_diameter]
    assert expected in _colors(image)


def test_cross_section_bent_bars_shown_only_when_used(designed):
    image = cross_section_image(designed)
    assert (BENT_REBAR_COLOR in _colors(image)) == designed.design.bent_rebars_used


def test_longitudinal_shows_stirrups(designed):
    assert designed.design.stirrup_spacing < designed.params.span
    image = longitudinal_section_image(designed)
    assert STIRRUP_GREY in _colors(image)


def test_longitudinal_bent_bars_shown_only_when_used(designed):
    image = longitudinal_section_image(designed)
    assert (BENT_REBAR_COLOR in _colors(image)) == designed.design.bent_rebars_used


def test_longitudinal_without_design_is_blank():
    image = longitudinal_section_image(RebarCalc())
    assert _colors(image) == {WHITE}


def test_cross_section_without_design_raises():
    with pytest.raises(ValueError):
        cross_section_image(RebarCalc())


def test_failed_design_draws_message_not_beam(failed):
    for image in (cross_section_image(failed), longitudinal_section_image(failed)):
        colors = _colors(image)
        assert CONCRETE_GREY not in colors
        assert len(colors) > 1