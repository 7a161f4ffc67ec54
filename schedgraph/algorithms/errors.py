"""Exceptions raised by the scheduling graph algorithms."""

from __future__ import annotations

from typing import Optional


class NotADAGError(ValueError):
    """Raised when an algorithm that needs an acyclic graph finds a cycle."""

    def __init__(self, message: str = "Graph contains cycles - not a DAG") -> None:
        super().__init__(message)


class CondensationInvariantError(RuntimeError):
    """Raised when an SCC condensation cannot be topologically sorted.

    A condensation is acyclic by construction, so this always indicates a
    defect rather than bad input.
    """

    def __init__(self, num_components: int, detail: Optional[str] = None) -> None:
        self.num_components = num_components
        message = (
            f"Condensation over {num_components} component(s) is not acyclic"
        )
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
