"""Registry mapping ``(mode, token)`` pairs to editor actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from tedit.runtime.telemetry import span

from .models import ActionRef, Binding, ResolutionMatch

_Slot = Tuple[str, str]  # (mode, token)


@dataclass(slots=True)
class RegistryStats:
    action_count: int
    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """A binding claims a token its mode already maps elsewhere."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        self.binding = binding
        self.conflicts = tuple(conflicts)
        taken_by = ", ".join(existing.id for existing in self.conflicts)
        super().__init__(
            f"'{binding.token}' in mode '{binding.mode}' is already bound by {taken_by}"
            f" (while registering '{binding.id}')"
        )


class KeymapRegistry:
    """Actions by id, bindings by id, and a slot index for O(1) dispatch."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._slots: Dict[_Slot, str] = {}
        self._logger_name = logger_name

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if action.id in self._actions and not replace:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Add ``binding``.

        Without ``replace`` a taken slot raises ``KeymapConflictError`` and a
        reused id raises ``ValueError``; with it, whatever occupied the slot
        or the id is dropped first.
        """

        slot = (binding.mode, binding.token)
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' targets unknown action '{binding.action_id}'"
                )

            occupant_id = self._slots.get(slot)
            if occupant_id is not None and occupant_id != binding.id:
                if not replace:
                    handle.add_metadata("conflicts", occupant_id)
                    raise KeymapConflictError(binding, (self._bindings[occupant_id],))
                self._drop(self._bindings[occupant_id])

            previous = self._bindings.get(binding.id)
            if previous is not None:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self._drop(previous)

            self._bindings[binding.id] = binding
            self._slots[slot] = binding.id
        return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is not None:
            self._drop(binding)
        return binding

    def resolve(self, mode: str, token: str) -> Optional[ResolutionMatch]:
        """Binding and action for ``token`` in ``mode``; ``None`` when unbound."""

        binding_id = self._slots.get((mode, token.strip().lower()))
        if binding_id is None:
            return None
        binding = self._bindings[binding_id]
        return ResolutionMatch(binding=binding, action=self._actions[binding.action_id])

    def stats(self) -> RegistryStats:
        modes = {binding.mode for binding in self._bindings.values()}
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            modes=tuple(sorted(modes)),
        )

    def _drop(self, binding: Binding) -> None:
        del self._bindings[binding.id]
        slot = (binding.mode, binding.token)
        if self._slots.get(slot) == binding.id:
            del self._slots[slot]


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
