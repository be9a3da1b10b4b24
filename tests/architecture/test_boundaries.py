from pytest_archon import archrule


def test_result_model_independence() -> None:
    """
    The result model (codes, paths, results, exceptions, protocol) is the
    foundation. It must not import validators, combinators or integrations.
    """
    (
        archrule("result_model_is_independent")
        .match("composable_validation.codes")
        .match("composable_validation.paths")
        .match("composable_validation.result")
        .match("composable_validation.exceptions")
        .match("composable_validation.ports")
        .should_not_import("composable_validation.atoms")
        .should_not_import("composable_validation.combinators")
        .should_not_import("composable_validation.limits")
        .should_not_import("composable_validation.registry")
        .should_not_import("composable_validation.boundary")
        .should_not_import("composable_validation.pydantic")
        .check("composable_validation", only_direct_imports=True)
    )


def test_leaves_do_not_depend_on_combinators() -> None:
    """
    Atomic validators are leaves; combinators build on them, never the
    other way round.
    """
    (
        archrule("leaves_isolation")
        .match("composable_validation.atoms")
        .should_not_import("composable_validation.combinators")
        .should_not_import("composable_validation.registry")
        .check("composable_validation", only_direct_imports=True)
    )


def test_pydantic_is_confined_to_its_adapter() -> None:
    """
    Only the pydantic adapter may import pydantic; the engine itself is
    dependency-free.
    """
    (
        archrule("pydantic_confined")
        .match("composable_validation.*")
        .exclude("composable_validation.pydantic")
        .should_not_import("pydantic*")
        .check("composable_validation", only_direct_imports=True)
    )
