"""Flexural and shear reinforcement design for a simply supported bridge girder.

All lengths are in millimetres and forces in newtons unless stated otherwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

CONCRETE_COVER = 30.0
CONCRETE_UNIT_WEIGHT = 2.5e-5  # N/mm^3
CONCRETE_FC = 32.4  # C50 compressive strength, MPa
CONCRETE_FT = 2.65  # C50 tensile strength, MPa
STEEL_FY = 400.0  # HRB400 yield strength, MPa
STEEL_DENSITY = 7.85e-6  # ton/mm^3
XI_B_LIMIT = 0.518  # ductile failure limit

STIRRUP_DIAMETER = 8.0
STIRRUP_LEGS = 2
ROW_CLEAR_SPACING = 25.0
MAX_STIRRUP_SPACING = 200.0
MIN_STIRRUP_SPACING = 100.0
STANDARD_DIAMETERS = (14.0, 16.0, 18.0, 20.0, 22.0, 25.0, 28.0)

AASHTO_DIVISOR_MOMENT = 1.7
AASHTO_DIVISOR_SHEAR = 1.4

COST_CONCRETE_PER_M3 = 600.0
COST_REBAR_BASE_PER_TON = 3500.0
COST_PER_REBAR_TIED = 300.0
DECK_WIDTH = 10000.0

NO_SOLUTION_MESSAGE = (
    "Error: No valid reinforcement combination found.\nIncrease beam dimensions."
)


@dataclass
class BridgeParams:
    """Geometry of the girder being designed."""

    span: float = 0.0
    width: float = 0.0
    height: float = 0.0
    h0: float = 0.0  # effective depth
    wheel_span: float = 0.0
    girder_spacing: float = 0.0


@dataclass
class RebarDesign:
    """Reinforcement layout, design forces and costs."""

    rebar_rows: int = 0
    rebar_count_row1: int = 0
    rebar_count_row2: int = 0
    flexure_rebar_diameter: float = 0.0
    stirrup_legs: int = 0
    stirrup_diameter: float = 0.0
    stirrup_spacing: float = 0.0
    bent_rebars_used: bool = False
    bent_rebar_count: int = 0
    total_cost: float = 0.0
    concrete_cost: float = 0.0
    steel_cost: float = 0.0
    labor_cost: float = 0.0
    max_moment: float = 0.0  # N*mm
    max_shear: float = 0.0  # N
    design_possible: bool = True
    error_message: str = ""


def _bar_area(diameter: float) -> float:
    return math.pi * (diameter / 2.0) ** 2


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def max_bars_per_row(diameter: float, width: float) -> int:
    """Return how many bars of ``diameter`` fit side by side in a beam of ``width``."""
    available_width = width - 2 * CONCRETE_COVER - 2 * STIRRUP_DIAMETER
    min_spacing = max(ROW_CLEAR_SPACING, diameter)
    if available_width < diameter:
        return 0
    return 1 + math.floor((available_width - diameter) / (diameter + min_spacing))


def auto_geo_params(span: float) -> tuple[float, float]:
    """Suggest a ``(width, height)`` cross-section for the given span."""
    if span <= 0:
        raise ValueError("span must be greater than zero")
    height = _round_half_away(span / 15 / 50) * 50
    width = _round_half_away(height / 2 / 50) * 50
    return max(width, 200.0), max(height, 400.0)


class RebarCalc:
    """Searches the standard bar diameters for the cheapest valid reinforcement."""

    def __init__(self) -> None:
        self.params = BridgeParams()
        self.design = RebarDesign()

    def reset(self) -> None:
        """Forget any previous geometry and design."""
        self.params = BridgeParams()
        self.design = RebarDesign()

    def run_design(
        self,
        span: float,
        width: float,
        height: float,
        total_vehicle_load: float,
        wheel_span: float,
        girder_spacing: float,
    ) -> bool:
        """Design the girder; return True when a valid layout was found.

        ``total_vehicle_load`` is in kN, ``wheel_span`` in metres, the rest in mm.
        """
        self.reset()
        self.params = BridgeParams(
            span=span,
            width=width,
            height=height,
            wheel_span=wheel_span * 1000.0,
            girder_spacing=girder_spacing,
        )

        spacing_m = girder_spacing / 1000.0
        if spacing_m > 0:
            factor_moment = spacing_m / AASHTO_DIVISOR_MOMENT
            factor_shear = spacing_m / AASHTO_DIVISOR_SHEAR
        else:
            factor_moment = factor_shear = 1.0

        self._calculate_max_forces(
            total_vehicle_load * factor_moment * 1000.0,
            total_vehicle_load * factor_shear * 1000.0,
        )
        return self._find_optimal_design()

    def _calculate_max_forces(self, load_for_moment: float, load_for_shear: float) -> None:
        span = self.params.span
        wheel = self.params.wheel_span
        q = self.params.width * self.params.height * CONCRETE_UNIT_WEIGHT

        dead_moment = q * span * span / 8.0
        axle = load_for_moment / 2.0
        x_crit = span / 2.0 - wheel / 4.0
        reaction = (axle * (span - x_crit) + axle * (span - x_crit - wheel)) / span
        self.design.max_moment = dead_moment + reaction * x_crit

        dead_shear = q * span / 2.0
        axle = load_for_shear / 2.0
        live_shear = (axle * span + axle * (span - wheel)) / span
        self.design.max_shear = dead_shear + live_shear

    def _find_optimal_design(self) -> bool:
        best_cost = math.inf
        found = False
        for diameter in STANDARD_DIAMETERS:
            result = self._try_diameter(diameter)
            if result is None:
                continue
            candidate, h0 = result
            if candidate.total_cost < best_cost:
                found = True
                best_cost = candidate.total_cost
                self.design = candidate
                self.params.h0 = h0

        if not found:
            self.design.design_possible = False
            self.design.error_message = NO_SOLUTION_MESSAGE
        return found

    def _try_diameter(self, diameter: float) -> tuple[RebarDesign, float] | None:
        width = self.params.width
        height = self.params.height
        candidate = RebarDesign(flexure_rebar_diameter=diameter)
        area_per_bar = _bar_area(diameter)

        h0 = height - CONCRETE_COVER - STIRRUP_DIAMETER - diameter / 2.0
        if h0 <= 0:
            return None

        required = self.design.max_moment / (STEEL_FY * 0.9 * h0)
        required = max(required, 0.45 * (CONCRETE_FT / STEEL_FY) * width * height)
        total_bars = max(math.ceil(required / area_per_bar), 2)

        per_row = max_bars_per_row(diameter, width)
        if per_row == 0:
            return None

        if total_bars <= per_row:
            candidate.rebar_rows = 1
            candidate.rebar_count_row1 = total_bars
        else:
            candidate.rebar_rows = 2
            candidate.rebar_count_row1 = math.ceil(total_bars / 2.0)
            candidate.rebar_count_row2 = total_bars - candidate.rebar_count_row1
            if candidate.rebar_count_row1 > per_row or candidate.rebar_count_row2 > per_row:
                return None
            y1 = CONCRETE_COVER + STIRRUP_DIAMETER + diameter / 2.0
            y2 = y1 + diameter + ROW_CLEAR_SPACING
            as1 = candidate.rebar_count_row1 * area_per_bar
            as2 = candidate.rebar_count_row2 * area_per_bar
            h0 = height - (as1 * y1 + as2 * y2) / (as1 + as2)

        x_comp = (total_bars * area_per_bar * STEEL_FY) / (CONCRETE_FC * width)
        if x_comp / h0 >= XI_B_LIMIT:
            return None

        self._design_shear(candidate, h0)
        self._price(candidate, h0)
        return candidate, h0

    def _design_shear(self, candidate: RebarDesign, h0: float) -> None:
        candidate.bent_rebars_used = False
        candidate.bent_rebar_count = 0
        candidate.stirrup_diameter = STIRRUP_DIAMETER
        candidate.stirrup_legs = STIRRUP_LEGS

        concrete_resistance = 0.20 * CONCRETE_FT * self.params.width * h0
        steel_required = self.design.max_shear - concrete_resistance
        if steel_required <= 0:
            candidate.stirrup_spacing = MAX_STIRRUP_SPACING
            return

        stirrup_area = candidate.stirrup_legs * _bar_area(candidate.stirrup_diameter)
        spacing = stirrup_area * STEEL_FY * h0 / steel_required

        if spacing < MIN_STIRRUP_SPACING and candidate.rebar_count_row1 >= 2:
            candidate.bent_rebars_used = True
            candidate.bent_rebar_count = 2
            bent_area = candidate.bent_rebar_count * _bar_area(candidate.flexure_rebar_diameter)
            steel_required -= 0.75 * STEEL_FY * bent_area * math.sin(math.pi / 4.0)

        if steel_required > 0:
            spacing = stirrup_area * STEEL_FY * h0 / steel_required
            spacing = math.floor(spacing / 25.0) * 25.0
            candidate.stirrup_spacing = min(max(spacing, MIN_STIRRUP_SPACING), MAX_STIRRUP_SPACING)
        else:
            candidate.stirrup_spacing = MAX_STIRRUP_SPACING

    def _price(self, candidate: RebarDesign, h0: float) -> None:
        span = self.params.span
        width = self.params.width
        height = self.params.height

        girders = 1.0
        if self.params.girder_spacing > 0:
            girders = max(DECK_WIDTH / self.params.girder_spacing, 2.0)

        volume_m3 = span * width * height / 1e9
        candidate.concrete_cost = volume_m3 * COST_CONCRETE_PER_M3 * girders

        longitudinal_bars = candidate.rebar_count_row1 + candidate.rebar_count_row2
        extra_length = 0.0
        if candidate.bent_rebars_used:
            extra_length = candidate.bent_rebar_count * height * 0.5
        flex_volume = _bar_area(candidate.flexure_rebar_diameter) * (
            longitudinal_bars * span + extra_length
        )
        flex_factor = 1.0 + (candidate.flexure_rebar_diameter - 14.0) * 0.025
        flex_cost = flex_volume * STEEL_DENSITY * COST_REBAR_BASE_PER_TON * flex_factor

        stirrup_length = 2 * (width + height)
        stirrups = span / candidate.stirrup_spacing if candidate.stirrup_spacing > 0 else 0.0
        stirrup_volume = (
            candidate.stirrup_legs
            * _bar_area(candidate.stirrup_diameter)
            * stirrup_length
            * stirrups
        )
        stirrup_factor = 1.0 + (candidate.stirrup_diameter - 14.0) * 0.025
        stirrup_cost = stirrup_volume * STEEL_DENSITY * COST_REBAR_BASE_PER_TON * stirrup_factor

        candidate.steel_cost = (flex_cost + stirrup_cost) * girders
        candidate.labor_cost = (longitudinal_bars + stirrups) * COST_PER_REBAR_TIED * girders
        candidate.total_cost = candidate.concrete_cost + candidate.steel_cost + candidate.labor_cost