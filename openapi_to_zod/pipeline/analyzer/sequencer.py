"""
Declaration ordering of named schemas.

Places every schema after the schemas it depends on wherever possible.
Genuine cycles cannot be ordered this way; the code generator covers them
with deferred references.
"""

from __future__ import annotations

from .dependency_analyzer import DependencyMap


class _Sequencer:
    def __init__(self, dependencies: DependencyMap):
        self.remaining = {name: list(deps) for name, deps in dependencies.items()}
        self.result: list[str] = []

    def run(self) -> list[str]:
        while self.remaining:
            name = next(iter(self.remaining))
            self._place(name, len(self.result))
        return self.result

    def _place(self, name: str, position: int) -> int:
        """Insert name at position, its dependencies ahead of it.

        Returns the number of names inserted. A name already placed (or not
        part of the map) inserts nothing, which is what ends a cycle.
        """
        if name not in self.remaining:
            return 0
        dependencies = self.remaining.pop(name)
        self.result.insert(position, name)
        inserted = 1
        for dependency in dependencies:
            count = self._place(dependency, position)
            position += count
            inserted += count
        return inserted


def sequence(dependencies: DependencyMap) -> list[str]:
    """
    Order named schemas so dependencies come before their dependents.

    Args:
        dependencies: Name to referenced names; not modified

    Returns:
        Every name of the map exactly once
    """
    return _Sequencer(dependencies).run()
