import pytest

from brighttask.dag import CyclicDependencyError, UnknownRecipeError, check_graph, resolve_order
from brighttask.dsl import book, recipe


def diamond():
    return book(
        recipe("base", "true"),
        recipe("left", "true", needs=["base"]),
        recipe("right", "true", needs=["base"]),
        recipe("top", "true", needs=["left", "right"]),
    )


def test_recipe_without_prerequisites_resolves_to_itself():
    assert resolve_order(diamond(), "base") == ["base"]


def test_shared_prerequisite_appears_once_first_position_wins():
    assert resolve_order(diamond(), "top") == ["base", "left", "right", "top"]


def test_prerequisites_come_before_dependents_for_every_recipe():
    g = diamond()
    for name in g:
        order = resolve_order(g, name)
        assert order[-1] == name
        assert len(order) == len(set(order))
        for pos, n in enumerate(order):
            for need in g[n].needs:
                assert order.index(need) < pos


def test_multiple_targets_share_one_order():
    assert resolve_order(diamond(), ["right", "left"]) == ["base", "right", "left"]


def test_unknown_target():
    with pytest.raises(UnknownRecipeError) as exc:
        resolve_order(diamond(), "nope")
    assert exc.value.name == "nope"
    assert "nope" in str(exc.value)


def test_unknown_prerequisite_names_requiring_recipe():
    g = book(recipe("package", "true", needs=["relase"]))
    with pytest.raises(UnknownRecipeError) as exc:
        resolve_order(g, "package")
    assert exc.value.name == "relase"
    assert exc.value.required_by == "package"


def test_cycle_is_reported_with_its_path():
    g = book(
        recipe("a", "true", needs=["b"]),
        recipe("b", "true", needs=["c"]),
        recipe("c", "true", needs=["a"]),
    )
    with pytest.raises(CyclicDependencyError) as exc:
        resolve_order(g, "a")
    assert exc.value.cycle == ("a", "b", "c", "a")
    assert "a -> b -> c -> a" in str(exc.value)


def test_self_dependency_is_a_cycle():
    g = book(recipe("a", "true", needs=["a"]))
    with pytest.raises(CyclicDependencyError):
        resolve_order(g, "a")


def test_check_graph_resolves_every_recipe():
    assert check_graph(diamond())["left"] == ["base", "left"]


def test_deep_prerequisite_chain_resolves():
    depth = 5000
    g = book(*(recipe(f"r{i}", "true", needs=[f"r{i - 1}"] if i else None) for i in range(depth)))
    order = resolve_order(g, f"r{depth - 1}")
    assert order == [f"r{i}" for i in range(depth)]
