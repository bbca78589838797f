import pytest

from design_patterns.creational import prototype
from design_patterns.creational.prototype import Library, PrototypeRegistry


def test_clone_does_not_share_books():
    common = Library("dev", ["designPatterns", "systemDesigns", "dsa"])
    modern = common.clone()
    modern.books.append("dbms")

    assert common.get_books() == "designPatterns,systemDesigns,dsa"
    assert modern.get_books() == "designPatterns,systemDesigns,dsa,dbms"
    assert modern.name == "dev"


def test_registry_clones_with_overrides():
    registry = PrototypeRegistry()
    original = Library("dev", ["dsa"])
    registry.register("starter", original)

    copy = registry.clone("starter", name="branch")
    copy.books.append("os")

    assert copy.name == "branch"
    assert original.name == "dev"
    assert original.books == ["dsa"]


def test_registry_rejects_unknown_names():
    registry = PrototypeRegistry()
    with pytest.raises(ValueError):
        registry.clone("missing")
    with pytest.raises(ValueError):
        registry.unregister("missing")


def test_registry_unregister():
    registry = PrototypeRegistry()
    registry.register("a", Library("a", []))
    registry.unregister("a")
    assert registry.names() == []


def test_registry_can_override_name_attribute():
    registry = PrototypeRegistry()
    registry.register("starter", Library("dev", ["dsa"]))

    branch = registry.clone("starter", name="branch", books=["os"])

    assert branch.name == "branch"
    assert branch.get_books() == "os"


def test_demo_prints_renamed_clone(capsys):
    prototype.main()
    assert "branch: designPatterns,systemDesigns,dsa\n" in capsys.readouterr().out
