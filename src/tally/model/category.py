from __future__ import annotations

"""
Category palette models.

Scope
- Pure Pydantic v2 models for the enumerated set of expense categories and how
  each one is drawn (chart color, list icon)
- Mirrors config/categories.yml structure
- No I/O operations (handled by category_io.py)
"""

from enum import StrEnum

from pydantic import BaseModel, Field, model_validator

FALLBACK_COLOR = "#cbd5e1"
FALLBACK_ICON = "🔖"


class DefaultCategory(StrEnum):
    """Categories available when no palette is configured."""

    food = "Food"
    travel = "Travel"
    shopping = "Shopping"
    bills = "Bills"
    other = "Other"


class CategoryStyle(BaseModel):
    """One category and its presentation attributes."""

    name: str = Field(min_length=1, description="Category name as stored on entries")
    color: str = Field(default=FALLBACK_COLOR, pattern=r"^#[0-9A-Fa-f]{6}$")
    icon: str = Field(default=FALLBACK_ICON)


class CategoryPalette(BaseModel):
    """Root configuration for categories.

    The palette is the single source of truth for which categories an entry may
    use and for the color/icon each one gets. Order is the display order of
    category pickers.
    """

    categories: list[CategoryStyle] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_unique_names(self) -> CategoryPalette:
        seen: set[str] = set()
        for style in self.categories:
            if style.name in seen:
                raise ValueError(f"Duplicate category in palette: {style.name}")
            seen.add(style.name)
        return self

    @classmethod
    def default(cls) -> CategoryPalette:
        return cls(
            categories=[
                CategoryStyle(name=DefaultCategory.food.value, color="#FFD166", icon="🍔"),
                CategoryStyle(name=DefaultCategory.travel.value, color="#06b6d4", icon="✈️"),
                CategoryStyle(name=DefaultCategory.shopping.value, color="#f472b6", icon="🛍️"),
                CategoryStyle(name=DefaultCategory.bills.value, color="#60a5fa", icon="💡"),
                CategoryStyle(name=DefaultCategory.other.value, color="#a78bfa", icon="🔖"),
            ]
        )

    def names(self) -> list[str]:
        return [style.name for style in self.categories]

    def find(self, name: str) -> CategoryStyle | None:
        for style in self.categories:
            if style.name == name:
                return style
        return None

    def contains(self, name: str) -> bool:
        return self.find(name) is not None

    def color_for(self, name: str) -> str:
        style = self.find(name)
        return style.color if style else FALLBACK_COLOR

    def icon_for(self, name: str) -> str:
        style = self.find(name)
        return style.icon if style else FALLBACK_ICON


__all__ = [
    "CategoryPalette",
    "CategoryStyle",
    "DefaultCategory",
    "FALLBACK_COLOR",
    "FALLBACK_ICON",
]
