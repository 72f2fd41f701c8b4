# tests/core/config/test_path.py
"""
Testes da resolução de caminhos pontuados.

Os testes asseguram que:
- a leitura não aceita correspondência parcial
- a leitura atravessa apenas mapas
- a escrita cria mapas intermediários e substitui escalares no caminho
"""

from hieracfg.core.config.path import assign, join_path, resolve, split_path


def test_split_and_join():
    assert split_path("clothing.pants.size") == ["clothing", "pants", "size"]
    assert split_path("") == [""]
    assert join_path("", "age") == "age"
    assert join_path("clothing", "jacket") == "clothing.jacket"


def test_resolve_existing_path_returns_reference():
    root = {"clothing": {"pants": {"size": "large"}}}

    found, value = resolve(root, "clothing.pants")

    assert found is True
    assert value is root["clothing"]["pants"]


def test_resolve_missing_segments():
    root = {"clothing": {"pants": {"size": "large"}}}

    assert resolve(root, "clothing.shirt") == (False, None)
    assert resolve(root, "hat.size") == (False, None)
    assert resolve(root, "") == (False, None)


def test_resolve_through_scalar_fails():
    """
    Verifica que um escalar intermediário interrompe a leitura.

    `clothing.pants.size` é texto; descer além dele não encontra nada,
    e nenhum valor parcial é retornado.
    """
    root = {"clothing": {"pants": {"size": "large"}}}

    assert resolve(root, "clothing.pants.size.large") == (False, None)


def test_resolve_does_not_mutate():
    root = {"a": {"b": 1}}
    resolve(root, "a.c.d")
    assert root == {"a": {"b": 1}}


def test_resolve_explicit_null_is_found():
    root = {"a": None}
    assert resolve(root, "a") == (True, None)


def test_assign_creates_intermediate_mappings():
    root = {}

    assign(root, "key.3.3", "value3")

    assert root == {"key": {"3": {"3": "value3"}}}


def test_assign_overwrites_existing_leaf():
    root = {"clothing": {"jacket": "leather"}}

    assign(root, "clothing.jacket", "textile")

    assert root == {"clothing": {"jacket": "textile"}}


def test_assign_replaces_scalar_on_the_way():
    root = {"age": 35}

    assign(root, "age.years", 36)

    assert root == {"age": {"years": 36}}


def test_assign_empty_path_writes_at_root():
    root = {}
    assign(root, "", 1)
    assert root == {"": 1}
