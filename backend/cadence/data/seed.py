"""Seed catalog for the Cadence pricing engine.

A single demo contractor (tenant 1) with one scheme of each recognised
type, two product configurations, and contractor settings. Prices are
typical 2025 residential repaint figures.
"""

from cadence.models.catalog import (
    ContractorSettings,
    LaborRateEntry,
    LaborRates,
    PricingScheme,
    ProductConfig,
    SheenOption,
)

DEMO_TENANT_ID = 1

SEED_PRICING_SCHEMES: list[PricingScheme] = [
    PricingScheme(
        id=1,
        tenant_id=DEMO_TENANT_ID,
        name="Turnkey per Square Foot",
        type="sqft_turnkey",
        pricing_rules={
            "walls": {"price": 2.50, "unit": "sqft"},
            "ceilings": {"price": 2.75, "unit": "sqft"},
            "trim": {"price": 1.50, "unit": "linear_ft"},
        },
    ),
    PricingScheme(
        id=2,
        tenant_id=DEMO_TENANT_ID,
        name="Labor + Paint",
        type="sqft_labor_paint",
        pricing_rules={"labor_rate": {"price": 0.55, "unit": "sqft"}},
    ),
    PricingScheme(
        id=3,
        tenant_id=DEMO_TENANT_ID,
        name="Time & Materials",
        type="hourly_time_materials",
        pricing_rules={
            "hourly_rate": {"price": 55.0, "unit": "hour"},
            "material_markup": {"value": 20, "unit": "percent"},
        },
    ),
    PricingScheme(
        id=4,
        tenant_id=DEMO_TENANT_ID,
        name="Unit Pricing",
        type="unit_pricing",
        pricing_rules={
            "door": {"price": 85.0, "unit": "door"},
            "window": {"price": 75.0, "unit": "window"},
            "trim": {"price": 1.75, "unit": "linear_ft"},
            "sqft": {"price": 1.85, "unit": "sqft"},
        },
    ),
    PricingScheme(
        id=5,
        tenant_id=DEMO_TENANT_ID,
        name="Flat Room Rate",
        type="room_flat_rate",
        pricing_rules={
            "small_room": {"price": 350.0, "unit": "room"},
            "medium_room": {"price": 500.0, "unit": "room"},
            "large_room": {"price": 750.0, "unit": "room"},
        },
    ),
]

_STANDARD_LABOR_RATES = LaborRates(
    interior=[
        LaborRateEntry(category="Walls", rate=0.55),
        LaborRateEntry(category="Ceilings", rate=0.65),
        LaborRateEntry(category="Trim", rate=1.25),
        LaborRateEntry(category="Cabinets", rate=3.50),
    ],
    exterior=[
        LaborRateEntry(category="Walls", rate=0.75),
        LaborRateEntry(category="Trim", rate=1.50),
    ],
)

SEED_PRODUCT_CONFIGS: list[ProductConfig] = [
    ProductConfig(
        id=101,
        tenant_id=DEMO_TENANT_ID,
        name="Premium Interior Latex",
        sheens=[
            SheenOption(sheen="Flat", price=42.0, coverage=400.0),
            SheenOption(sheen="Eggshell", price=45.0, coverage=375.0),
            SheenOption(sheen="Satin", price=48.0, coverage=350.0),
            SheenOption(sheen="Semi-Gloss", price=52.0, coverage=350.0),
        ],
        labor_rates=_STANDARD_LABOR_RATES,
    ),
    ProductConfig(
        id=102,
        tenant_id=DEMO_TENANT_ID,
        name="Exterior Acrylic",
        sheens=[
            SheenOption(sheen="Flat", price=55.0, coverage=325.0),
            SheenOption(sheen="Satin", price=60.0, coverage=300.0),
        ],
        labor_rates=_STANDARD_LABOR_RATES,
        default_markup=20.0,
    ),
]

SEED_CONTRACTOR_SETTINGS: list[ContractorSettings] = [
    ContractorSettings(
        tenant_id=DEMO_TENANT_ID,
        default_markup_percentage=15.0,
        tax_rate_percentage=8.0,
        labor_markup_percent=10.0,
        material_markup_percent=15.0,
        overhead_percent=10.0,
        net_profit_percent=15.0,
        deposit_percent=50.0,
    ),
]
