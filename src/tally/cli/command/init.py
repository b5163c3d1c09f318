"""Initialize a new tally workspace directory."""

from __future__ import annotations

from tally.model.category import CategoryPalette
from tally.model.category_io import save_category_palette
from tally.workspace import Workspace

from .util import console

_CATEGORIES_HEADER = """\
# Category palette
# Entries may only use the categories listed here. Each one gets a chart color
# (#RRGGBB) and a list icon. Add, rename or recolor freely.
"""


def run(*, workspace: Workspace) -> int:
    """Create data/ and a starter config/categories.yml.

    Skips anything that already exists (safe to run on an existing workspace).

    Args:
        workspace: Workspace to initialize

    Returns:
        Exit code (0 = success)
    """
    root = workspace.root
    console.print(f"[bold cyan]Initializing workspace:[/] {root}\n")

    created = []
    skipped = []

    for directory in [workspace.data_dir, workspace.config_dir]:
        if directory.exists():
            skipped.append(str(directory.relative_to(root)) + "/")
        else:
            directory.mkdir(parents=True, exist_ok=True)
            created.append(str(directory.relative_to(root)) + "/")

    path = workspace.categories_config
    if path.exists():
        skipped.append(str(path.relative_to(root)))
    else:
        save_category_palette(path, CategoryPalette.default())
        body = path.read_text(encoding="utf-8")
        path.write_text(_CATEGORIES_HEADER + body, encoding="utf-8")
        created.append(str(path.relative_to(root)))

    if created:
        console.print("[green]Created:[/]")
        for item in created:
            console.print(f"  {item}")

    if skipped:
        console.print("[dim]Already exists (skipped):[/dim]")
        for item in skipped:
            console.print(f"  [dim]{item}[/dim]")

    if not created:
        console.print("[green]Workspace already fully initialized.[/]")
    else:
        console.print(f"\n[green]Workspace ready at {root}[/]")
        console.print("\n[dim]Next steps:[/dim]")
        console.print("  1. Edit config/categories.yml to adjust categories")
        console.print("  2. Run: tally add --amount 200 --category Food")
        console.print("  3. Run: tally summary")

    return 0
