"""Tests for the whole-quote builder pricing models."""

from __future__ import annotations

import pytest

from cadence.builder import (
    LEGACY_MODEL_MAP,
    calculate_pricing,
    resolve_pricing_model,
    selected_areas,
)
from cadence.exceptions import ValidationError
from cadence.models.builder import BuilderArea, BuilderItem, BuilderRules
from cadence.models.enums import PricingModel

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


def _area(name: str, *items: tuple[str, float, str]) -> BuilderArea:
    return BuilderArea(
        name=name,
        items=[
            BuilderItem(category_name=category, quantity=qty, measurement_unit=unit)
            for category, qty, unit in items
        ],
    )


_ROOMS = [
    _area("Living Room", ("Walls", 400, "sqft"), ("Doors", 4, "each")),
    _area("Bedroom", ("Ceilings", 200, "sqft")),
]


# ---------------------------------------------------------------------------
# Model resolution
# ---------------------------------------------------------------------------


class TestResolvePricingModel:
    @pytest.mark.parametrize("model", [m.value for m in PricingModel])
    def test_model_names(self, model: str) -> None:
        assert resolve_pricing_model(model) == PricingModel(model)

    @pytest.mark.parametrize(
        ("legacy", "expected"),
        [
            ("sqft_turnkey", PricingModel.TURNKEY),
            ("sqft_labor_paint", PricingModel.RATE_BASED_SQFT),
            ("hourly_time_materials", PricingModel.PRODUCTION_BASED),
            ("unit_pricing", PricingModel.FLAT_RATE_UNIT),
            ("room_flat_rate", PricingModel.FLAT_RATE_UNIT),
        ],
    )
    def test_legacy_scheme_types(self, legacy: str, expected: PricingModel) -> None:
        assert resolve_pricing_model(legacy) == expected

    def test_every_legacy_type_is_mapped(self) -> None:
        assert len(LEGACY_MODEL_MAP) == 5

    def test_unknown_model(self) -> None:
        with pytest.raises(ValidationError, match="unsupported pricing model: magic"):
            resolve_pricing_model("magic")


# ---------------------------------------------------------------------------
# Turnkey
# ---------------------------------------------------------------------------


class TestTurnkey:
    def test_default_rate_with_materials(self) -> None:
        pricing = calculate_pricing("turnkey", home_sqft=2000)

        assert pricing.rate == 3.5
        assert pricing.total == pytest.approx(7000.0)
        assert pricing.labor_cost == pytest.approx(4200.0)
        assert pricing.material_cost == pytest.approx(2800.0)
        assert pricing.home_sqft == 2000
        assert pricing.job_scope == "interior"

    def test_interior_rate_override(self) -> None:
        rules = BuilderRules(interior_rate=4.0, exterior_rate=5.0)
        pricing = calculate_pricing("turnkey", rules, home_sqft=1000)
        assert pricing.total == pytest.approx(4000.0)

    def test_exterior_rate_override(self) -> None:
        rules = BuilderRules(interior_rate=4.0, exterior_rate=5.0)
        pricing = calculate_pricing(
            "turnkey", rules, home_sqft=1000, job_scope="exterior"
        )
        assert pricing.total == pytest.approx(5000.0)

    def test_zero_turnkey_rate_uses_default(self) -> None:
        pricing = calculate_pricing(
            "turnkey", BuilderRules(turnkey_rate=0), home_sqft=1000
        )
        assert pricing.rate == 3.5
        assert pricing.total == pytest.approx(3500.0)

    def test_without_materials_all_labor(self) -> None:
        rules = BuilderRules(include_materials=False)
        pricing = calculate_pricing("sqft_turnkey", rules, home_sqft=1000)

        assert pricing.model == "turnkey"
        assert pricing.labor_cost == pytest.approx(3500.0)
        assert pricing.material_cost == 0.0
        assert pricing.include_materials is False


# ---------------------------------------------------------------------------
# Rate-based sqft
# ---------------------------------------------------------------------------


class TestRateBased:
    def test_default_category_rates(self) -> None:
        pricing = calculate_pricing(
            "rate_based_sqft", BuilderRules(labor_rates={}), _ROOMS
        )

        # 400 * 0.55 + 4 * 45 + 200 * 0.65 = 530
        assert pricing.labor_cost == pytest.approx(530.0)
        # doors are not sqft: 600 * 2 / 350 -> 4 gallons at $40
        assert pricing.total_sqft == pytest.approx(600.0)
        assert pricing.gallons == 4
        assert pricing.material_cost == pytest.approx(160.0)
        assert pricing.subtotal == pytest.approx(690.0)
        assert len(pricing.breakdown) == 3

    def test_configured_rate(self) -> None:
        rules = BuilderRules(labor_rates={"walls": 1.0})
        pricing = calculate_pricing("rate_based_sqft", rules, [_area("A", ("Walls", 100, "sqft"))])
        assert pricing.labor_cost == pytest.approx(100.0)

    def test_unconfigured_rates_price_labor_at_zero(self) -> None:
        pricing = calculate_pricing("rate_based_sqft", BuilderRules(), _ROOMS)
        assert pricing.labor_cost == 0.0
        assert pricing.material_cost == pytest.approx(160.0)

    def test_zero_cost_per_gallon_uses_default(self) -> None:
        rules = BuilderRules(labor_rates={}, cost_per_gallon=0)
        pricing = calculate_pricing(
            "rate_based_sqft", rules, [_area("A", ("Walls", 350, "sqft"))]
        )

        # 350 * 2 / 350 = 2 gallons at the $40 default
        assert pricing.gallons == 2
        assert pricing.material_cost == pytest.approx(80.0)

    def test_null_rate_entry_uses_default(self) -> None:
        rules = BuilderRules.model_validate({"laborRates": {"walls": None}})
        pricing = calculate_pricing(
            "rate_based_sqft", rules, [_area("A", ("Walls", 100, "sqft"))]
        )
        assert pricing.labor_cost == pytest.approx(55.0)

    def test_unrecognised_category(self) -> None:
        pricing = calculate_pricing(
            "rate_based_sqft",
            BuilderRules(labor_rates={}),
            [_area("Deck", ("Railings", 50, "linear_ft"))],
        )
        assert pricing.labor_cost == 0.0
        assert pricing.breakdown[0].labor_rate == 0.0


# ---------------------------------------------------------------------------
# Production-based
# ---------------------------------------------------------------------------


class TestProductionBased:
    def test_hours_from_production_rates(self) -> None:
        pricing = calculate_pricing(
            "production_based", BuilderRules(production_rates={}), _ROOMS
        )

        # walls 400/300 h, ceilings 200/250 h at $50; doors have no rate
        assert pricing.total_hours == pytest.approx(400 / 300 + 0.8)
        assert pricing.labor_cost == pytest.approx(66.6667 + 40.0, abs=0.001)
        assert len(pricing.breakdown) == 2
        assert pricing.material_cost == pytest.approx(160.0)

    def test_hourly_rate_from_rules(self) -> None:
        rules = BuilderRules(production_rates={"walls": 100}, hourly_labor_rate=60)
        pricing = calculate_pricing(
            "hourly_time_materials", rules, [_area("A", ("Walls", 200, "sqft"))]
        )

        assert pricing.model == "production_based"
        assert pricing.labor_cost == pytest.approx(120.0)
        assert pricing.breakdown[0].hours == pytest.approx(2.0)
        assert pricing.breakdown[0].hourly_rate == 60.0


# ---------------------------------------------------------------------------
# Flat-rate unit
# ---------------------------------------------------------------------------


class TestFlatRate:
    def test_default_unit_prices(self) -> None:
        areas = [
            _area(
                "Upstairs",
                ("Interior Door", 3, "each"),
                ("Small Room", 1, "each"),
                ("Bedroom", 1, "each"),
            )
        ]
        pricing = calculate_pricing("flat_rate_unit", BuilderRules(unit_prices={}), areas)

        # 3 * 85 + 350 + 500
        assert pricing.total == pytest.approx(1105.0)
        assert pricing.labor_cost == pytest.approx(663.0)
        assert pricing.material_cost == pytest.approx(442.0)
        assert [line.unit_price for line in pricing.breakdown] == [85.0, 350.0, 500.0]

    def test_configured_prices(self) -> None:
        rules = BuilderRules(
            unit_prices={"window": 90, "room_large": 900}, include_materials=False
        )
        areas = [_area("A", ("Window", 2, "each"), ("Large Room", 1, "each"))]
        pricing = calculate_pricing("unit_pricing", rules, areas)

        assert pricing.total == pytest.approx(1080.0)
        assert pricing.labor_cost == pytest.approx(1080.0)
        assert pricing.material_cost == 0.0

    def test_unconfigured_prices_are_zero(self) -> None:
        areas = [_area("A", ("Interior Door", 3, "each"))]
        assert calculate_pricing("room_flat_rate", None, areas).total == 0.0


# ---------------------------------------------------------------------------
# Item selection
# ---------------------------------------------------------------------------


class TestSelectedItems:
    def test_unselected_items_are_not_priced(self) -> None:
        area = BuilderArea.model_validate(
            {
                "name": "Hall",
                "items": [
                    {"categoryName": "Door", "quantity": 2, "selected": False},
                    {"categoryName": "Window", "quantity": 1},
                ],
            }
        )
        pricing = calculate_pricing("flat_rate_unit", BuilderRules(unit_prices={}), [area])

        assert pricing.total == pytest.approx(75.0)
        assert [line.category for line in pricing.breakdown] == ["Window"]

    def test_areas_without_selected_items_are_dropped(self) -> None:
        areas = [
            BuilderArea(
                name="Closet",
                items=[BuilderItem(category_name="Walls", quantity=80, selected=False)],
            ),
            _area("Den", ("Walls", 100, "sqft")),
        ]
        pricing = calculate_pricing("rate_based_sqft", BuilderRules(labor_rates={}), areas)

        assert [line.area_name for line in pricing.breakdown] == ["Den"]
        assert pricing.total_sqft == pytest.approx(100.0)

    def test_selected_areas_leaves_input_untouched(self) -> None:
        area = BuilderArea(
            name="Den",
            items=[
                BuilderItem(category_name="Walls", quantity=100),
                BuilderItem(category_name="Trim", quantity=40, selected=False),
            ],
        )
        kept = selected_areas([area])

        assert [item.category_name for item in kept[0].items] == ["Walls"]
        assert len(area.items) == 2

    def test_missing_unit_defaults_to_sqft(self) -> None:
        item = BuilderItem.model_validate(
            {"categoryName": "Walls", "quantity": 10, "measurementUnit": None}
        )
        assert item.measurement_unit == "sqft"
