"""Built-in actions and the bindings that seed each mode."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import ActionRef, Binding
from .registry import KeymapRegistry

# (action id, module attribute); resolved lazily because the
# action modules import the mode layer, which imports this package.
_ACTION_TABLE: tuple[tuple[str, str], ...] = (
    ("edit.insert_char", "editing.insert_char"),
    ("edit.insert_tab", "editing.insert_tab"),
    ("edit.insert_newline", "editing.insert_newline"),
    ("edit.delete_backward", "editing.delete_backward"),
    ("edit.delete_forward", "editing.delete_forward"),
    ("cursor.left", "motion.cursor_left"),
    ("cursor.right", "motion.cursor_right"),
    ("cursor.up", "motion.cursor_up"),
    ("cursor.down", "motion.cursor_down"),
    ("cursor.line_start", "motion.line_start"),
    ("cursor.line_end", "motion.line_end"),
    ("cursor.page_up", "motion.page_up"),
    ("cursor.page_down", "motion.page_down"),
    ("session.save", "session.save"),
    ("session.quit", "session.quit_editor"),
    ("prompt.append", "prompt.append"),
    ("prompt.erase", "prompt.erase"),
    ("prompt.submit", "prompt.submit"),
    ("prompt.cancel", "prompt.cancel"),
)

_EDIT_TOKENS: tuple[tuple[str, str], ...] = (
    ("insert_char", "edit.insert_char"),
    ("insert_tab", "edit.insert_tab"),
    ("insert_newline", "edit.insert_newline"),
    ("delete_backward", "edit.delete_backward"),
    ("delete_forward", "edit.delete_forward"),
    ("arrow_left", "cursor.left"),
    ("arrow_right", "cursor.right"),
    ("arrow_up", "cursor.up"),
    ("arrow_down", "cursor.down"),
    ("home", "cursor.line_start"),
    ("ctrl+a", "cursor.line_start"),
    ("end", "cursor.line_end"),
    ("ctrl+d", "cursor.line_end"),
    ("page_up", "cursor.page_up"),
    ("ctrl+arrow_up", "cursor.page_up"),
    ("page_down", "cursor.page_down"),
    ("ctrl+arrow_down", "cursor.page_down"),
    ("ctrl+s", "session.save"),
    ("ctrl+q", "session.quit"),
)

_PROMPT_TOKENS: tuple[tuple[str, str], ...] = (
    ("insert_char", "prompt.append"),
    ("delete_backward", "prompt.erase"),
    ("delete_forward", "prompt.erase"),
    ("insert_newline", "prompt.submit"),
    ("escape", "prompt.cancel"),
    ("ctrl+q", "session.quit"),
)


def default_actions() -> tuple[ActionRef, ...]:
    from tedit import actions

    refs: list[ActionRef] = []
    for action_id, target in _ACTION_TABLE:
        module_name, attr = target.split(".")
        handler = getattr(getattr(actions, module_name), attr)
        refs.append(ActionRef(id=action_id, handler=handler))
    return tuple(refs)


def _bindings_for(mode: str, tokens: Iterable[tuple[str, str]]) -> list[Binding]:
    return [
        Binding(id=f"{mode}.{token}", mode=mode, token=token, action_id=action_id)
        for token, action_id in tokens
    ]


DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    _bindings_for("edit", _EDIT_TOKENS) + _bindings_for("prompt", _PROMPT_TOKENS)
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings for every mode."""

    excluded = set(exclude_bindings or ())

    for action in default_actions():
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=True)


__all__ = ["load_default_keymaps", "default_actions", "DEFAULT_BINDINGS"]
