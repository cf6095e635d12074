"""Namespace scope tracking for a single walk.

A ``NamespaceScope`` is an immutable value threaded through the walk:
entering a namespace returns a new scope, and leaving one returns the
scope the next sibling sees. Two policies decide what that is:

- ``flat``: the most recently entered namespace stays current after its
  body is walked (last write wins, nothing is restored).
- ``stack``: leaving a namespace restores the scope that was current
  before it was entered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

NamespaceMode = Literal["flat", "stack"]


@dataclass(frozen=True, slots=True)
class NamespaceScope:
    current: str | None = None
    mode: NamespaceMode = "flat"
    outer: NamespaceScope | None = None

    def enter(self, name: str) -> NamespaceScope:
        outer = self if self.mode == "stack" else None
        return NamespaceScope(current=name, mode=self.mode, outer=outer)

    def leave(self, after_body: NamespaceScope) -> NamespaceScope:
        """Scope to continue with once this namespace's body has been walked.

        ``after_body`` is the scope the body walk ended with.
        """
        if self.mode == "stack":
            return self.outer if self.outer is not None else NamespaceScope(mode=self.mode)
        return after_body

