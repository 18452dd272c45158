import pytest

from tedit.keymaps import (
    DEFAULT_BINDINGS,
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "edit",
    token: str = "ctrl+x",
    action_id: str = "core.test",
) -> Binding:
    return Binding(id=binding_id, mode=mode, token=token, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="edit.test")

    registry.register_binding(binding)

    match = registry.resolve("edit", "ctrl+x")
    assert match is not None
    assert match.binding == binding
    assert match.action.id == "core.test"


def test_tokens_are_case_insensitive() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="edit.test", token="Ctrl+X"))

    assert registry.resolve("edit", "CTRL+x") is not None


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="edit.first"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="edit.second"))

    assert [b.id for b in excinfo.value.conflicts] == ["edit.first"]


def test_same_token_in_different_modes_does_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="edit.test"))
    registry.register_binding(make_binding(binding_id="prompt.test", mode="prompt"))

    assert registry.stats().modes == ("edit", "prompt")


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_action(make_action("core.other"))
    registry.register_binding(make_binding(binding_id="edit.first"))

    registry.register_binding(
        make_binding(binding_id="edit.second", action_id="core.other"), replace=True
    )

    match = registry.resolve("edit", "ctrl+x")
    assert match is not None
    assert match.binding.id == "edit.second"
    assert registry.stats().binding_count == 1


def test_binding_for_unknown_action_raises() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="edit.test"))


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="edit.test"))

    removed = registry.unregister_binding("edit.test")

    assert removed is not None
    assert registry.resolve("edit", "ctrl+x") is None
    assert registry.unregister_binding("edit.test") is None
    assert registry.stats().modes == ()


def test_duplicate_action_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())
    registry.register_action(make_action(), replace=True)


def test_load_default_keymaps_covers_both_modes() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    stats = registry.stats()
    assert stats.modes == ("edit", "prompt")
    assert stats.binding_count == len(DEFAULT_BINDINGS)
    for token in ("ctrl+s", "ctrl+q", "ctrl+a", "ctrl+d", "home", "page_down"):
        assert registry.resolve("edit", token) is not None
    assert registry.resolve("prompt", "escape") is not None
    assert registry.resolve("edit", "escape") is None


def test_load_default_keymaps_extra_and_excluded_bindings() -> None:
    registry = KeymapRegistry()
    extra = make_binding(binding_id="edit.quit_alt", action_id="session.quit")

    load_default_keymaps(
        registry, extra_bindings=[extra], exclude_bindings=["edit.ctrl+a"]
    )

    assert registry.resolve("edit", "ctrl+a") is None
    match = registry.resolve("edit", "ctrl+x")
    assert match is not None
    assert match.action.id == "session.quit"
