# src/brighttask/dsl.py
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from .model import Recipe, Step

RecipeBook = Mapping[str, Recipe]


# ---------------------------------------------------------------------
# Step helper
# ---------------------------------------------------------------------

def sh(cmd: str) -> Step:
    """
    Create a shell action.

    A leading '@' silences the echo of the command line, as in a justfile:
        sh("@brighttask --list")
    """
    cmd = cmd.strip()
    if not cmd:
        raise ValueError("sh() needs a non-empty command")
    if cmd.startswith("@"):
        return Step(run=cmd[1:].lstrip(), echo=False)
    return Step(run=cmd)


# ---------------------------------------------------------------------
# Recipe helper
# ---------------------------------------------------------------------

def recipe(
    name: str,
    *steps: Step | str,  # allow recipe("x", sh(...), "cmd ...")
    needs: str | Optional[List[str]] = None,  # a single name is allowed
    doc: str | None = None,
) -> Recipe:
    if not name or any(c.isspace() for c in name):
        raise ValueError(f"Invalid recipe name: {name!r}")
    if isinstance(needs, str):
        needs = [needs]

    steps_final = tuple(s if isinstance(s, Step) else sh(s) for s in steps)

    return Recipe(
        name=name,
        steps=steps_final,
        needs=tuple(needs or ()),
        doc=doc,
    )


# ---------------------------------------------------------------------
# Recipe book
# ---------------------------------------------------------------------

def book(*recipes: Recipe | Iterable[Recipe]) -> RecipeBook:
    """
    Build the immutable recipe book, keeping declaration order.

        RECIPES = book(
            recipe("build", "cargo build", doc="Build debug"),
            recipe("release", "cargo build --release"),
        )

    Duplicate names are rejected here; missing prerequisites surface when a
    recipe is resolved.
    """
    flat: List[Recipe] = []
    for r in recipes:
        if isinstance(r, Recipe):
            flat.append(r)
        else:
            flat.extend(r)

    names = [r.name for r in flat]
    if len(set(names)) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise ValueError(f"Duplicate recipe names found: {dupes}")

    return MappingProxyType({r.name: r for r in flat})
