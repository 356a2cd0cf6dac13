from musiclife.registry import Registry, RegistryBuilder


def test_get_instance_is_shared():
    class Kind:
        pass

    first = Registry.get_instance(Kind)
    first.add("a")
    second = Registry.get_instance(Kind)
    assert second is first
    assert second.items() == ["a"]


def test_kinds_are_separate():
    class One:
        pass

    class Two:
        pass

    Registry.get_instance(One).add(1)
    assert Registry.get_instance(Two).items() == []


def test_create_instance_replaces_existing():
    class Kind:
        pass

    old = Registry.get_instance(Kind)
    old.add("old")
    new = Registry.create_instance(Kind, ["x", "y"])
    assert new is not old
    assert Registry.get_instance(Kind) is new
    assert new.items() == ["x", "y"]


def test_builder_keeps_order_and_installs():
    class Kind:
        pass

    built = RegistryBuilder(Kind).add("a").add("b").add("c").build()
    assert built.items() == ["a", "b", "c"]
    assert Registry.get_instance(Kind) is built
    assert len(built) == 3


def test_items_returns_copy():
    class Kind:
        pass

    registry = Registry.create_instance(Kind, ["a"])
    registry.items().append("b")
    assert list(registry) == ["a"]