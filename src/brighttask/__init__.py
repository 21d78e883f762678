from .dsl import sh, recipe, book, RecipeBook
from .dag import resolve_order, check_graph, RecipeError, UnknownRecipeError, CyclicDependencyError
from .runner import run_recipes, load_recipes, find_recipe_file, ActionFailure
from .model import Recipe, Step

__all__ = [
    "sh", "recipe", "book", "RecipeBook",
    "resolve_order", "check_graph", "RecipeError", "UnknownRecipeError", "CyclicDependencyError",
    "run_recipes", "load_recipes", "find_recipe_file", "ActionFailure",
    "Recipe", "Step",
]
