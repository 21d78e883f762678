# dag.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .model import Recipe


class RecipeError(Exception):
    """Base class for every error raised while resolving or running recipes."""


@dataclass
class UnknownRecipeError(RecipeError):
    name: str
    required_by: Optional[str] = None

    def __str__(self) -> str:
        if self.required_by:
            return f"Recipe '{self.required_by}' needs unknown recipe '{self.name}'"
        return f"Unknown recipe '{self.name}'"


@dataclass
class CyclicDependencyError(RecipeError):
    cycle: Tuple[str, ...]

    def __str__(self) -> str:
        return f"Recipe dependency cycle: {' -> '.join(self.cycle)}"


def resolve_order(graph: Mapping[str, Recipe], targets: str | Iterable[str]) -> List[str]:
    """
    Linearize the prerequisites reachable from `targets`.

    Depth-first, prerequisites visited in declared order, so:
      - every prerequisite comes strictly before the recipe that needs it
      - a recipe reachable through several paths appears once, at its first position
      - the same graph and targets always give the same order

    Raises UnknownRecipeError / CyclicDependencyError before anything runs.
    """
    if isinstance(targets, str):
        targets = [targets]

    order: List[str] = []
    done: set[str] = set()
    path: List[str] = []  # current DFS path, for cycle reporting
    on_path: set[str] = set()
    stack: List[Tuple[str, Iterator[str]]] = []

    def enter(name: str, required_by: Optional[str]) -> None:
        if name in on_path:
            start = path.index(name)
            raise CyclicDependencyError(cycle=tuple(path[start:] + [name]))
        recipe = graph.get(name)
        if recipe is None:
            raise UnknownRecipeError(name=name, required_by=required_by)
        path.append(name)
        on_path.add(name)
        stack.append((name, iter(recipe.needs)))

    # explicit stack, so chain depth is not bounded by the recursion limit
    for target in targets:
        if target in done:
            continue
        enter(target, None)
        while stack:
            name, needs = stack[-1]
            need = next(needs, None)
            if need is None:
                stack.pop()
                path.pop()
                on_path.discard(name)
                done.add(name)
                order.append(name)
            elif need not in done:
                enter(need, name)

    return order


def check_graph(graph: Mapping[str, Recipe]) -> Dict[str, List[str]]:
    """
    Resolve every recipe of the graph.

    Returns name -> resolved order; raises on the first unknown prerequisite or cycle.
    """
    return {name: resolve_order(graph, name) for name in graph}
