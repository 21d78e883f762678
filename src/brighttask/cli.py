# cli.py
from __future__ import annotations

import sys
from pathlib import Path

import click

from brighttask.dag import CyclicDependencyError, UnknownRecipeError
from brighttask.dsl import RecipeBook
from brighttask.runner import RECIPE_FILE, ActionFailure, find_recipe_file, load_recipes, run_recipes
from brighttask.ui.console import Console, set_console, get_console


def discover_recipe_file(file_arg: str | None) -> Path:
    """
    Discover the recipe file from argument or by searching upwards.

    Args:
        file_arg: Optional --file argument from CLI

    Returns:
        Path to the recipe file

    Raises:
        SystemExit: If no recipe file can be found
    """
    console = get_console()

    if file_arg:
        recipe_path = Path(file_arg)
        if not recipe_path.exists() and recipe_path.suffix != ".py":
            recipe_path = Path(str(recipe_path) + ".py")
        if not recipe_path.exists():
            console.print_error(
                "Recipe file not found",
                f"Could not find recipe file: {file_arg}",
                suggestion=f"Specify an existing file:\n  brighttask --file {RECIPE_FILE}",
            )
            sys.exit(1)
        return recipe_path

    found = find_recipe_file(".")
    if found is None:
        console.print_error(
            "No recipe file found",
            "Could not find a recipe file.",
            details=[
                "Looked for:",
                f"  {RECIPE_FILE} (current directory and its parents)",
            ],
            suggestion=f"Create {RECIPE_FILE} or specify one explicitly:\n  brighttask --file my_recipes.py",
        )
        sys.exit(1)
    return found


def _load(ctx: click.Context, recipe_path: Path) -> RecipeBook:
    console = get_console()
    try:
        return load_recipes(recipe_path)
    except Exception as e:
        console.print_error(
            "Failed to load recipes",
            f"Could not load recipes from {recipe_path}",
            details=[str(e)],
        )
        if ctx.obj.get("debug", False):
            import traceback
            traceback.print_exc()
        sys.exit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("recipes", nargs=-1)
@click.option("-f", "--file", "file_arg", default=None, help=f"Recipe file path (defaults to {RECIPE_FILE}, searched upwards)")
@click.option("-l", "--list", "list_only", is_flag=True, default=False, help="List available recipes and exit")
@click.option("-s", "--show", default=None, metavar="RECIPE", help="Print a recipe definition and exit")
@click.option("-n", "--dry-run", is_flag=True, default=False, help="Print actions without running them")
@click.option("-q", "--quiet", is_flag=True, default=False, help="Do not echo actions before running them")
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.pass_context
def cli(ctx, recipes, file_arg, list_only, show, dry_run, quiet, debug):
    """brighttask: run Tray Bright recipes and their prerequisites."""
    console = Console(debug=debug, quiet=quiet)
    set_console(console)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    recipe_path = discover_recipe_file(file_arg)
    console.print_debug(f"recipe file: {recipe_path}")
    graph = _load(ctx, recipe_path)

    if list_only or (not recipes and show is None):
        console.print_recipe_list(graph.values())
        return

    try:
        if show is not None:
            if show not in graph:
                raise UnknownRecipeError(name=show)
            console.print_recipe(graph[show])
            return

        run_recipes(
            graph,
            recipes,
            root=recipe_path.resolve().parent,
            dry_run=dry_run,
            console=console,
        )

    except UnknownRecipeError as e:
        console.print_error(
            "Unknown recipe",
            str(e),
            suggestion="Run `brighttask --list` to see available recipes.",
        )
        sys.exit(1)
    except CyclicDependencyError as e:
        console.print_error("Circular dependency", str(e))
        sys.exit(1)
    except ActionFailure as e:
        # The tool's own output already explains the failure.
        console.print_debug(str(e))
        sys.exit(e.status)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
