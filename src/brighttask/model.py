# model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Step:
    """A single shell command (action) inside a recipe."""
    run: str
    echo: bool = True


@dataclass(frozen=True)
class Recipe:
    """
    A named recipe: prerequisites + ordered actions.

    `needs` holds names of recipes that must fully succeed BEFORE this one.
    `doc` is only used when listing recipes.
    """
    name: str
    steps: Tuple[Step, ...] = ()
    needs: Tuple[str, ...] = ()
    doc: Optional[str] = None

    @property
    def commands(self) -> list[str]:
        return [s.run for s in self.steps]
