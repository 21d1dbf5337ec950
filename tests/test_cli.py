from PIL import Image

from rebarsim.cli import (
    INVALID_INPUT_MESSAGE,
    INVALID_SPAN_MESSAGE,
    build_parser,
    format_costs,
    main,
)
from rebarsim.design import NO_SOLUTION_MESSAGE, RebarCalc, RebarDesign, auto_geo_params
from rebarsim.drawing import CROSS_SECTION_SIZE, LONGITUDINAL_SIZE

GOOD_ARGS = [
    "--span", "10000",
    "--width", "600",
    "--height", "1000",
    "--weight", "300",
    "--wheel-span", "1.8",
    "--girder-spacing", "2000",
]


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.view == "cross"
    assert args.span == 0.0
    assert args.auto_geometry is False


def test_format_costs_two_decimals():
    design = RebarDesign(total_cost=1234.5, concrete_cost=1, steel_cost=2, labor_cost=3)
    report = format_costs(design)
    assert "Total cost: 1234.50 Yuan" in report
    assert len(report.splitlines()) == 4


def test_format_costs_failed_design():
    report = format_costs(RebarDesign(design_possible=False))
    assert "Yuan" not in report
    assert report.count("---") == 4


def test_main_rejects_missing_values(capsys):
    assert main(["--span", "10000"]) == 1
    assert INVALID_INPUT_MESSAGE in capsys.readouterr().err


def test_main_auto_geometry_needs_span(capsys):
    assert main(["--auto-geometry"]) == 1
    assert INVALID_SPAN_MESSAGE in capsys.readouterr().err


def test_main_auto_geometry_reports_dimensions(capsys):
    width, height = auto_geo_params(10000)
    main(["--span", "10000", "--auto-geometry", "--weight", "300", "--girder-spacing", "2000"])
    out = capsys.readouterr().out
    assert f"width: {width:g} height: {height:g}" in out


def test_main_success_reports_costs(capsys):
    assert main(GOOD_ARGS) == 0
    calc = RebarCalc()
    calc.run_design(10000, 600, 1000, 300, 1.8, 2000)
    out = capsys.readouterr().out
    assert format_costs(calc.design) in out


def test_main_writes_cross_section(tmp_path):
    path = tmp_path / "cross.png"
    assert main(GOOD_ARGS + ["--output", str(path)]) == 0
    with Image.open(path) as image:
        assert image.size == CROSS_SECTION_SIZE


def test_main_writes_longitudinal_section(tmp_path):
    path = tmp_path / "long.png"
    assert main(GOOD_ARGS + ["--view", "longitudinal", "-o", str(path)]) == 0
    with Image.open(path) as image:
        assert image.size == LONGITUDINAL_SIZE


def test_main_reports_impossible_design(capsys):
    args = GOOD_ARGS.copy()
    args[args.index("--width") + 1] = "50"
    assert main(args) == 1
    captured = capsys.readouterr()
    assert NO_SOLUTION_MESSAGE in captured.err
    assert "---" in captured.out