from __future__ import annotations

"""
Category palette I/O (YAML loading and saving).

Functions for reading and writing config/categories.yml.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from tally.model.category import CategoryPalette

logger = logging.getLogger(__name__)


def load_category_palette(path: Path) -> CategoryPalette:
    """Load the category palette from YAML (safe loader).

    A missing file, an empty file or a file without any categories yields the
    built-in default palette. A malformed file is logged and also falls back to
    the defaults so that the ledger stays usable.

    Args:
        path: Path to categories.yml file

    Returns:
        CategoryPalette instance
    """
    if not path.exists():
        return CategoryPalette.default()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        palette = CategoryPalette.model_validate(data)
    except (yaml.YAMLError, ValidationError, OSError) as e:
        logger.error("Ignoring unreadable category palette %s: %s", path, e)
        return CategoryPalette.default()

    if not palette.categories:
        return CategoryPalette.default()
    return palette


def save_category_palette(path: Path, palette: CategoryPalette) -> None:
    """Save the category palette to a YAML file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)

    data = palette.model_dump(mode="json")

    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(
            data,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


__all__ = [
    "load_category_palette",
    "save_category_palette",
]
