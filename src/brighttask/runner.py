# runner.py
from __future__ import annotations

import runpy
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .dag import RecipeError, resolve_order
from .dsl import RecipeBook, book
from .model import Recipe, Step
from .ui.console import Console, get_console

RECIPE_FILE = "brighttask_recipes.py"


# ----------------------------------------------------------------------
# Recipe file loading (local file/module)
# ----------------------------------------------------------------------

def find_recipe_file(start: str | Path = ".") -> Optional[Path]:
    """
    Look for brighttask_recipes.py in `start`, then in each parent directory.

    Returns:
        Path to the recipe file, or None if there is none up to the filesystem root.
    """
    here = Path(start).expanduser().resolve()
    for directory in (here, *here.parents):
        candidate = directory / RECIPE_FILE
        if candidate.is_file():
            return candidate
    return None


def load_recipes(path: str | Path) -> RecipeBook:
    """
    Load a recipe book from a python file path.

    The file must define either:
      - recipes() -> recipe book or List[Recipe]
      - RECIPES = book(...) or [Recipe, ...]
    """
    rf_path = Path(path).expanduser().resolve()
    if not rf_path.exists():
        raise FileNotFoundError(f"Recipe file not found: {rf_path}")
    if rf_path.suffix != ".py":
        raise ValueError(f"Recipe file must be a .py file, got: {rf_path.name}")

    module_name = f"brighttask_recipes_{rf_path.stem}"
    globals_dict = runpy.run_path(str(rf_path), run_name=module_name)

    recipes = None
    if "recipes" in globals_dict and callable(globals_dict["recipes"]):
        recipes = globals_dict["recipes"]()
    elif "RECIPES" in globals_dict:
        recipes = globals_dict["RECIPES"]

    if isinstance(recipes, list) and all(isinstance(r, Recipe) for r in recipes):
        return book(recipes)
    if hasattr(recipes, "values") and all(isinstance(r, Recipe) for r in recipes.values()):
        return book(list(recipes.values()))

    raise TypeError(
        "Recipe file must return/define a recipe book. "
        "Define recipes() -> book(...) or RECIPES = book(recipe(...), ...)."
    )


# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------

@dataclass
class ActionFailure(RecipeError):
    recipe: str
    cmd: str
    exit_code: int

    @property
    def status(self) -> int:
        """Exit status for the invoking process (signals map to 128 + N)."""
        if self.exit_code < 0:
            return 128 - self.exit_code
        return self.exit_code

    def __str__(self) -> str:
        return f"Recipe '{self.recipe}' failed (exit={self.exit_code}): {self.cmd}"


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def _run_step(recipe: Recipe, step: Step, root: Path, console: Console, dry_run: bool) -> None:
    if dry_run:
        console.print_action(step.run, force=True)
        return
    if step.echo:
        console.print_action(step.run)

    # Output is inherited, never captured.
    proc = subprocess.run(step.run, shell=True, cwd=str(root))

    if proc.returncode != 0:
        raise ActionFailure(recipe=recipe.name, cmd=step.run, exit_code=proc.returncode)


def _run_recipe(recipe: Recipe, root: Path, console: Console, dry_run: bool) -> None:
    console.print_debug(f"recipe {recipe.name}: {len(recipe.steps)} action(s)")
    for step in recipe.steps:
        _run_step(recipe, step, root, console, dry_run)


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_recipes(
    graph: RecipeBook,
    targets: str | Iterable[str],
    *,
    root: str | Path = ".",
    dry_run: bool = False,
    console: Console | None = None,
) -> List[str]:
    """
    Resolve `targets` and run every recipe of the resolved order, one action at a time.

    The first failing action raises ActionFailure; nothing after it runs.
    Returns the resolved order that was executed.
    """
    console = console or get_console()
    root_p = Path(root).resolve()
    if not root_p.is_dir():
        raise FileNotFoundError(f"Project root not found: {root_p}")

    order = resolve_order(graph, targets)
    console.print_debug(f"resolved order: {order} (root={root_p})")

    for name in order:
        _run_recipe(graph[name], root_p, console, dry_run)

    return order
