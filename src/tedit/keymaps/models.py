"""Value types shared by the keymap registry and the modes that consult it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class ActionRef:
    """A named editor action; calling it runs ``handler(context, command)``."""

    id: str
    handler: Callable[..., object]

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("action id must be non-empty")
        if not callable(self.handler):
            raise TypeError(f"action '{self.id}' handler is not callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """``token`` pressed in ``mode`` runs ``action_id``.

    Tokens are normalised to lower case, so ``Ctrl+S`` and ``ctrl+s`` name the
    same chord.
    """

    id: str
    mode: str
    token: str
    action_id: str

    def __post_init__(self) -> None:
        for name in ("id", "mode", "token", "action_id"):
            if not getattr(self, name):
                raise ValueError(f"binding {name} must be non-empty")
        object.__setattr__(self, "token", self.token.strip().lower())


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


__all__ = ["ActionRef", "Binding", "ResolutionMatch"]
