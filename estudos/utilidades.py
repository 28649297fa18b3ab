"""Small helpers shared by the examples."""

from __future__ import annotations

from typing import Protocol


class _Closable(Protocol):
    def close(self) -> object: ...


def closer(resource: _Closable) -> None:
    """Close ``resource``, printing the error instead of raising it."""
    try:
        resource.close()
    except Exception as error:  # any close failure is reported, never raised
        print(error)