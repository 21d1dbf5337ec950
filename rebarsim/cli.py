"""Command-line front end: design a girder, report its costs and draw it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .design import RebarCalc, RebarDesign, auto_geo_params
from .drawing import cross_section_image, longitudinal_section_image

INVALID_INPUT_MESSAGE = "Error: Please enter valid values greater than zero in all fields."
INVALID_SPAN_MESSAGE = "Error: Span must be greater than zero for auto-generation."

_COST_FIELDS = (
    ("Total cost", "total_cost"),
    ("Concrete cost", "concrete_cost"),
    ("Steel cost", "steel_cost"),
    ("Labor cost", "labor_cost"),
)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the command."""
    parser = argparse.ArgumentParser(
        prog="rebarsim",
        description="Concrete rebar simulator for a simply supported bridge girder.",
    )
    parser.add_argument("--span", type=float, default=0.0, help="span in mm")
    parser.add_argument("--width", type=float, default=0.0, help="girder width in mm")
    parser.add_argument("--height", type=float, default=0.0, help="girder height in mm")
    parser.add_argument("--weight", type=float, default=0.0, help="total vehicle load in kN")
    parser.add_argument("--wheel-span", type=float, default=0.0, help="axle spacing in m")
    parser.add_argument(
        "--girder-spacing", type=float, default=0.0, help="spacing of girders in mm"
    )
    parser.add_argument(
        "--auto-geometry",
        action="store_true",
        help="derive width and height from the span",
    )
    parser.add_argument(
        "--view",
        choices=("cross", "longitudinal"),
        default="cross",
        help="which section to draw",
    )
    parser.add_argument("--output", "-o", help="write the drawing to this image file")
    return parser


def format_costs(design: RebarDesign) -> str:
    """Return the cost report of ``design``, one line per item."""
    lines = []
    for label, field in _COST_FIELDS:
        value = f"{getattr(design, field):.2f} Yuan" if design.design_possible else "---"
        lines.append(f"{label}: {value}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = build_parser().parse_args(argv)

    if args.auto_geometry:
        if args.span <= 0:
            print(INVALID_SPAN_MESSAGE, file=sys.stderr)
            return 1
        args.width, args.height = auto_geo_params(args.span)
        print(f"width: {args.width:g} height: {args.height:g}")

    fields = (args.span, args.width, args.height, args.weight, args.girder_spacing)
    if any(value <= 0 for value in fields):
        print(INVALID_INPUT_MESSAGE, file=sys.stderr)
        print(format_costs(RebarDesign(design_possible=False)))
        return 1

    calc = RebarCalc()
    success = calc.run_design(
        args.span, args.width, args.height, args.weight, args.wheel_span, args.girder_spacing
    )
    print(format_costs(calc.design))
    if not success:
        print(calc.design.error_message, file=sys.stderr)

    if args.output:
        draw = cross_section_image if args.view == "cross" else longitudinal_section_image
        draw(calc).save(args.output)

    if success:
        section = "Cross-section" if args.view == "cross" else "Longitudinal section"
        where = f" written to {args.output}" if args.output else ""
        print(f"Design complete. {section}{where}.")
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())