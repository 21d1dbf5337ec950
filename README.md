# rebarsim

rebarsim designs the reinforcement for one girder of a simply supported concrete bridge. It assumes C50 concrete and HRB400 steel. For each standard bar diameter (14, 16, 18, 20, 22, 25 and 28 mm) it sizes the flexural bars in one or two rows, the 8 mm two-leg stirrups and, where they are needed, two bent-up bars. It then prices the concrete, the steel and the labour, and keeps the cheapest design that passes the checks. It can also draw the cross-section and the longitudinal section as images.

## Installation

```
pip install .
```

To install and run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
rebarsim --span 20000 --width 650 --height 1350 --weight 550 --wheel-span 1.8 --girder-spacing 2500 -o cross.png
```

Options:

| Option | Meaning |
| --- | --- |
| `--span` | span in mm |
| `--width` | girder width in mm |
| `--height` | girder height in mm |
| `--weight` | total vehicle load in kN |
| `--wheel-span` | axle spacing in m |
| `--girder-spacing` | spacing of the girders in mm |
| `--auto-geometry` | derive width and height from the span and print them |
| `--view {cross,longitudinal}` | which section to draw (default `cross`) |
| `--output`, `-o` | write the drawing to this image file |

Span, width, height, weight and girder spacing must all be greater than zero. If any of them is not, the command prints an error and exits with status 1. With `--auto-geometry`, any `--width` and `--height` you give are replaced. The height is the span divided by 15, rounded to 50 mm, with a minimum of 400 mm. The width is half the height, rounded to 50 mm, with a minimum of 200 mm.

The command prints the total, concrete, steel and labour costs in Yuan. If no valid design exists, it prints `---` for each cost and exits with status 1. A drawing is written only when `--output` is given. The image format is chosen from the file extension.

## Library use

```python
from rebarsim.design import RebarCalc, auto_geo_params
from rebarsim.drawing import cross_section_image, longitudinal_section_image

width, height = auto_geo_params(20000.0)   # span in mm -> (width, height)
calc = RebarCalc()
ok = calc.run_design(20000.0, width, height, 550.0, 1.8, 2500.0)

print(calc.design.total_cost, calc.design.flexure_rebar_diameter)
cross_section_image(calc).save("cross.png")
longitudinal_section_image(calc).save("long.png")
```

Modules:

- `rebarsim.design` provides:
  - `BridgeParams` and `RebarDesign`, two dataclasses.
  - `RebarCalc`, with `run_design` (returns `True` when a valid layout was found) and `reset`.
  - `max_bars_per_row(diameter, width)`.
  - `auto_geo_params(span)`, which raises `ValueError` for a span of zero or less.
- `rebarsim.drawing` provides:
  - `cross_section_image(calc)`, which returns a 600×600 Pillow image. It raises `ValueError` if no design has been run.
  - `longitudinal_section_image(calc)`, which returns a 1200×400 Pillow image.
- `rebarsim.cli` provides `build_parser`, `format_costs` and `main`.

Units:

| Quantity | Unit |
| --- | --- |
| span, width, height, girder spacing | mm |
| vehicle load | kN |
| wheel span | m |
| costs | Yuan |

If no combination of bar diameter and layout passes the design checks, `design.design_possible` is `False` and `design.error_message` explains why. The drawings then show "DESIGN FAILED" and that message instead of a section.

## What it does not do

rebarsim has no graphical window. Drawings are only returned as Pillow images, or saved to a file with `--output`. They are never shown on screen.