from __future__ import annotations

from pathlib import Path

import pytest

from ejforge.errors import InvalidAppNameError, InvalidModuleNameError, ModuleNameTakenError
from ejforge.io.interfaces import ModuleLookup
from ejforge.naming import (
    camelize,
    check_module_availability,
    infer_app_name,
    validate_app_name,
    validate_identifiers,
    validate_module_name,
)


class _CountingLookup(ModuleLookup):
    def __init__(self, taken: set[str]) -> None:
        self.taken = taken
        self.queries: list[str] = []

    def exists(self, name: str) -> bool:
        self.queries.append(name)
        return name in self.taken


@pytest.mark.parametrize("name", ["a", "myapp", "my_app", "app2", "a_b_c_1", "x_"])
def test_validate_app_name_accepts(name):
    validate_app_name(name, explicit=True)


@pytest.mark.parametrize(
    "name",
    ["", "MyApp", "myApp", "1app", "_app", "my-app", "my app", "app.name", "café", "app\n"],
)
def test_validate_app_name_rejects(name):
    with pytest.raises(InvalidAppNameError):
        validate_app_name(name, explicit=True)


def test_app_name_message_mentions_option_only_when_inferred():
    with pytest.raises(InvalidAppNameError) as explicit:
        validate_app_name("Bad", explicit=True)
    with pytest.raises(InvalidAppNameError) as inferred:
        validate_app_name("Bad", explicit=False)

    assert "'Bad'" in str(explicit.value)
    assert "--app APP" not in str(explicit.value)
    assert "inferred from the path" in str(inferred.value)
    assert "--app APP" in str(inferred.value)


@pytest.mark.parametrize("name", ["Foo", "Foo.Bar", "Demo.App", "A1_b.C", "MyApp.Sub.Mod"])
def test_validate_module_name_accepts(name):
    validate_module_name(name)


@pytest.mark.parametrize("name", ["", "foo", "Foo.bar", "Foo..Bar", ".Foo", "Foo.", "Foo-Bar", "Foo Bar"])
def test_validate_module_name_rejects(name):
    with pytest.raises(InvalidModuleNameError, match="Foo.Bar"):
        validate_module_name(name)


def test_check_module_availability():
    lookup = _CountingLookup({"Enum"})
    check_module_availability("Demo", lookup)

    with pytest.raises(ModuleNameTakenError, match="Enum"):
        check_module_availability("Enum", lookup)


def test_invalid_module_is_never_looked_up():
    lookup = _CountingLookup(set())
    with pytest.raises(InvalidModuleNameError):
        validate_identifiers("demo", "not_a_module", lookup, explicit_app=True)
    with pytest.raises(InvalidAppNameError):
        validate_identifiers("Demo", "Demo", lookup, explicit_app=False)

    assert lookup.queries == []


@pytest.mark.parametrize(
    "value, expected",
    [
        ("myapp", "Myapp"),
        ("my_app", "MyApp"),
        ("my_app_2", "MyApp2"),
        ("demo", "Demo"),
    ],
)
def test_camelize(value, expected):
    assert camelize(value) == expected


def test_infer_app_name_uses_basename(tmp_path: Path):
    assert infer_app_name(tmp_path / "nested" / "myapp") == "myapp"
    assert infer_app_name(str(tmp_path / "other") + "/") == "other"
