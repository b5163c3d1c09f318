"""Tests for category palette models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tally.model.category import (
    FALLBACK_COLOR,
    FALLBACK_ICON,
    CategoryPalette,
    CategoryStyle,
)


class DescribeCategoryStyle:
    def it_should_default_color_and_icon(self):
        style = CategoryStyle(name="Pets")
        assert style.color == FALLBACK_COLOR
        assert style.icon == FALLBACK_ICON

    def it_should_reject_non_hex_color(self):
        with pytest.raises(ValidationError):
            CategoryStyle(name="Pets", color="blue")

    def it_should_reject_empty_name(self):
        with pytest.raises(ValidationError):
            CategoryStyle(name="")


class DescribeCategoryPalette:
    def it_should_ship_the_five_default_categories(self):
        palette = CategoryPalette.default()
        assert palette.names() == ["Food", "Travel", "Shopping", "Bills", "Other"]

    def it_should_map_categories_to_colors_and_icons(self):
        palette = CategoryPalette.default()
        assert palette.color_for("Food") == "#FFD166"
        assert palette.icon_for("Bills") == "💡"

    def it_should_fall_back_for_unknown_categories(self):
        palette = CategoryPalette.default()
        assert palette.contains("Pets") is False
        assert palette.color_for("Pets") == FALLBACK_COLOR
        assert palette.icon_for("Pets") == FALLBACK_ICON

    def it_should_be_extensible(self):
        palette = CategoryPalette(
            categories=[*CategoryPalette.default().categories, CategoryStyle(name="Pets", color="#00ff00")]
        )
        assert palette.contains("Pets")
        assert palette.color_for("Pets") == "#00ff00"

    def it_should_reject_duplicate_names(self):
        with pytest.raises(ValidationError, match="Duplicate category"):
            CategoryPalette(categories=[CategoryStyle(name="Food"), CategoryStyle(name="Food")])
