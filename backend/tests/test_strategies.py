"""Tests for the per-surface pricing formulas."""

from __future__ import annotations

from typing import Any

import pytest

from cadence.models.breakdown import SurfaceCost
from cadence.models.catalog import PricingScheme
from cadence.strategies import (
    compute_surface_cost,
    rule_value,
    turnkey_surface_key,
    unit_type_for,
)


def _scheme(scheme_type: str, rules: dict[str, Any] | None = None) -> PricingScheme:
    return PricingScheme(id=1, name="Test", type=scheme_type, pricing_rules=rules or {})


def _cost(
    scheme: PricingScheme,
    sqft: float = 100.0,
    labor_rate: float = 0.0,
    sheen_price: float = 40.0,
    sheen_coverage: float = 350.0,
    surface_type: str = "Walls",
) -> SurfaceCost:
    return compute_surface_cost(
        sqft=sqft,
        labor_rate=labor_rate,
        sheen_price=sheen_price,
        sheen_coverage=sheen_coverage,
        pricing_scheme=scheme,
        surface_type=surface_type,
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestRuleValue:
    def test_reads_price(self) -> None:
        assert rule_value({"walls": {"price": 2.5}}, "walls") == 2.5

    def test_reads_named_field(self) -> None:
        assert rule_value({"material_markup": {"value": 25}}, "material_markup", "value") == 25

    def test_missing_key_is_zero(self) -> None:
        assert rule_value({}, "walls") == 0.0

    def test_non_mapping_rule_is_zero(self) -> None:
        assert rule_value({"walls": 2.5}, "walls") == 0.0

    def test_string_price_is_coerced(self) -> None:
        assert rule_value({"walls": {"price": "3.25"}}, "walls") == 3.25


class TestSurfaceKeys:
    @pytest.mark.parametrize(
        ("surface_type", "expected"),
        [
            ("Walls", "walls"),
            ("Ceilings", "ceilings"),
            ("Baseboard Trim", "trim"),
            ("Wall Trim", "walls"),
            ("Cabinets", "walls"),
        ],
    )
    def test_turnkey_surface_key(self, surface_type: str, expected: str) -> None:
        assert turnkey_surface_key(surface_type) == expected

    @pytest.mark.parametrize(
        ("surface_type", "expected"),
        [
            ("Front Door", "door"),
            ("Window Trim", "window"),
            ("Crown Trim", "trim"),
            ("Walls", "sqft"),
        ],
    )
    def test_unit_type(self, surface_type: str, expected: str) -> None:
        assert unit_type_for(surface_type) == expected


# ---------------------------------------------------------------------------
# sqft_turnkey
# ---------------------------------------------------------------------------


class TestSqftTurnkey:
    def test_walls_rate_split_60_40(self) -> None:
        scheme = _scheme("sqft_turnkey", {"walls": {"price": 2.5}})
        cost = _cost(scheme, sqft=200.0, surface_type="Walls")

        assert cost.total == pytest.approx(500.0)
        assert cost.labor_cost == pytest.approx(300.0)
        assert cost.material_cost == pytest.approx(200.0)

    def test_ceiling_rate(self) -> None:
        scheme = _scheme("sqft_turnkey", {"walls": {"price": 2.5}, "ceilings": {"price": 3.0}})
        cost = _cost(scheme, sqft=100.0, surface_type="Ceilings")
        assert cost.total == pytest.approx(300.0)

    def test_default_rate_without_rules(self) -> None:
        cost = _cost(_scheme("sqft_turnkey"), sqft=100.0, surface_type="Accent Wall")
        assert cost.total == pytest.approx(200.0)

    def test_zero_rule_price_falls_back_to_default(self) -> None:
        scheme = _scheme("sqft_turnkey", {"walls": {"price": 0}})
        cost = _cost(scheme, sqft=100.0)
        assert cost.total == pytest.approx(200.0)

    def test_ignores_labor_rate_and_sheen(self) -> None:
        scheme = _scheme("sqft_turnkey", {"walls": {"price": 2.0}})
        a = _cost(scheme, labor_rate=9.0, sheen_price=99.0)
        b = _cost(scheme, labor_rate=0.0, sheen_price=0.0)
        assert a == b


# ---------------------------------------------------------------------------
# sqft_labor_paint
# ---------------------------------------------------------------------------


class TestSqftLaborPaint:
    def test_labor_plus_paint(self) -> None:
        cost = _cost(
            _scheme("sqft_labor_paint"),
            sqft=100.0,
            labor_rate=0.60,
            sheen_price=40.0,
            sheen_coverage=350.0,
        )

        # gallons = 100 / 350 = 0.2857; material = 0.2857 * 40 = 11.43
        assert cost.labor_cost == pytest.approx(60.0)
        assert cost.material_cost == pytest.approx(11.43, abs=0.01)
        assert cost.total == pytest.approx(71.43, abs=0.01)

    def test_rule_labor_rate_when_no_resolved_rate(self) -> None:
        scheme = _scheme("sqft_labor_paint", {"labor_rate": {"price": 0.70}})
        cost = _cost(scheme, sqft=100.0, labor_rate=0.0)
        assert cost.labor_cost == pytest.approx(70.0)

    def test_resolved_rate_beats_rule(self) -> None:
        scheme = _scheme("sqft_labor_paint", {"labor_rate": {"price": 0.70}})
        cost = _cost(scheme, sqft=100.0, labor_rate=0.60)
        assert cost.labor_cost == pytest.approx(60.0)

    def test_default_labor_rate(self) -> None:
        cost = _cost(_scheme("sqft_labor_paint"), sqft=100.0, labor_rate=0.0)
        assert cost.labor_cost == pytest.approx(55.0)

    def test_zero_coverage_uses_default(self) -> None:
        cost = _cost(
            _scheme("sqft_labor_paint"), sqft=700.0, sheen_price=35.0, sheen_coverage=0.0
        )
        assert cost.material_cost == pytest.approx(70.0)

    def test_zero_sheen_price_means_no_material(self) -> None:
        cost = _cost(_scheme("sqft_labor_paint"), sheen_price=0.0, labor_rate=0.5)
        assert cost.material_cost == 0.0
        assert cost.total == pytest.approx(cost.labor_cost)


# ---------------------------------------------------------------------------
# hourly_time_materials
# ---------------------------------------------------------------------------


class TestHourlyTimeMaterials:
    def test_hours_and_marked_up_paint(self) -> None:
        scheme = _scheme(
            "hourly_time_materials",
            {"hourly_rate": {"price": 60}, "material_markup": {"value": 10}},
        )
        cost = _cost(scheme, sqft=200.0, sheen_price=35.0, sheen_coverage=350.0)

        # 2 hours * $60; 200/350 gal * $35 = $20, +10% = $22
        assert cost.labor_cost == pytest.approx(120.0)
        assert cost.material_cost == pytest.approx(22.0)
        assert cost.total == pytest.approx(142.0)

    def test_defaults(self) -> None:
        cost = _cost(
            _scheme("hourly_time_materials"),
            sqft=350.0,
            sheen_price=35.0,
            sheen_coverage=350.0,
        )

        # 3.5 hours * $50; 1 gal * $35 * 1.20
        assert cost.labor_cost == pytest.approx(175.0)
        assert cost.material_cost == pytest.approx(42.0)

    def test_ignores_resolved_labor_rate(self) -> None:
        cost = _cost(_scheme("hourly_time_materials"), sqft=100.0, labor_rate=99.0)
        assert cost.labor_cost == pytest.approx(50.0)


# ---------------------------------------------------------------------------
# unit_pricing
# ---------------------------------------------------------------------------


class TestUnitPricing:
    def test_door_units_split_70_30(self) -> None:
        scheme = _scheme("unit_pricing", {"door": {"price": 85}})
        cost = _cost(scheme, sqft=3.0, surface_type="Front Door")

        assert cost.total == pytest.approx(255.0)
        assert cost.labor_cost == pytest.approx(178.5)
        assert cost.material_cost == pytest.approx(76.5)

    def test_window_before_trim(self) -> None:
        scheme = _scheme("unit_pricing", {"window": {"price": 75}, "trim": {"price": 2}})
        cost = _cost(scheme, sqft=2.0, surface_type="Window Trim")
        assert cost.total == pytest.approx(150.0)

    def test_falls_back_to_labor_rate(self) -> None:
        cost = _cost(_scheme("unit_pricing"), sqft=100.0, labor_rate=0.55)
        assert cost.total == pytest.approx(55.0)
        assert cost.labor_cost == pytest.approx(38.5)
        assert cost.material_cost == pytest.approx(16.5)

    def test_default_unit_rate(self) -> None:
        cost = _cost(_scheme("unit_pricing"), sqft=10.0, labor_rate=0.0)
        assert cost.total == pytest.approx(50.0)


# ---------------------------------------------------------------------------
# room_flat_rate
# ---------------------------------------------------------------------------


class TestRoomFlatRate:
    def test_share_of_medium_room(self) -> None:
        scheme = _scheme("room_flat_rate", {"medium_room": {"price": 600}})
        cost = _cost(scheme, sqft=9999.0)

        assert cost.total == pytest.approx(120.0)
        assert cost.labor_cost == pytest.approx(78.0)
        assert cost.material_cost == pytest.approx(42.0)

    def test_default_flat_rate(self) -> None:
        cost = _cost(_scheme("room_flat_rate"))
        assert cost.total == pytest.approx(100.0)
        assert cost.labor_cost == pytest.approx(65.0)
        assert cost.material_cost == pytest.approx(35.0)


# ---------------------------------------------------------------------------
# Unrecognised scheme type
# ---------------------------------------------------------------------------


class TestUnknownScheme:
    def test_unknown_type_prices_at_zero(self) -> None:
        cost = _cost(_scheme("unknown_scheme"), sqft=500.0, labor_rate=1.0)
        assert cost == SurfaceCost(labor_cost=0.0, material_cost=0.0, total=0.0)

    def test_unknown_type_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="cadence.strategies"):
            _cost(_scheme("sqft_labor_only"))
        assert "sqft_labor_only" in caplog.text
