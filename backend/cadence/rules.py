"""Human-readable summaries of pricing scheme rules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cadence.models.base import coerce_number

NO_RULES_SUMMARY = "No pricing rules defined"


def generate_rules_summary(pricing_rules: Mapping[str, Any] | None) -> str:
    """Summarise rules as e.g. ``"WALLS: $2/sqft, LABOR RATE: $0.55/sqft"``."""
    if not pricing_rules:
        return NO_RULES_SUMMARY

    summaries: list[str] = []
    for key, rule in pricing_rules.items():
        surface_name = key.replace("_", " ", 1).upper()
        if isinstance(rule, Mapping):
            price = coerce_number(rule.get("price"))
            unit = rule.get("unit") or "unit"
        else:
            price = coerce_number(rule)
            unit = "unit"
        summaries.append(f"{surface_name}: ${price:g}/{unit}")

    return ", ".join(summaries)
