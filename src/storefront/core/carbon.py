"""Carbon footprint estimates for catalogue products.

A product's footprint is its stored ``carbonFootprint`` when it has a
non-zero one, otherwise the baseline for its category. The comparable
conventional product is assumed to emit a fixed multiple of that.
"""

import math

from pydantic import BaseModel

from storefront.entities.service.product import Product
from storefront.runtime.config.config_data import CarbonConfig


class CarbonSavings(BaseModel):
    savings: str
    percentage: str


class CarbonFootprint(BaseModel):
    footprint: int | float
    conventionalFootprint: int | float
    savings: CarbonSavings


def stored_footprint(product: Product) -> int | float | None:
    """The product's own figure, or None when missing, zero or not a number."""
    value = (product.model_extra or {}).get("carbonFootprint")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not value or math.isnan(value):
        return None
    return value


def estimate_footprint(product: Product, config: CarbonConfig) -> CarbonFootprint:
    footprint = stored_footprint(product)
    if footprint is None:
        footprint = (
            config.category_baselines.get(product.category) or config.default_baseline
        )

    conventional = footprint * config.conventional_multiplier
    savings = conventional - footprint
    percentage = savings / conventional * 100

    return CarbonFootprint(
        footprint=footprint,
        conventionalFootprint=conventional,
        savings=CarbonSavings(savings=f"{savings:.2f}", percentage=f"{percentage:.0f}"),
    )
