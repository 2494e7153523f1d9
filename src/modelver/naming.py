"""Collision-free labels for newly created model objects."""

from __future__ import annotations

from typing import Iterable, Optional


def new_name(base_name: str, existing_names: Optional[Iterable[str]]) -> str:
    """Return a label that does not clash with ``existing_names``.

    e.g. if ``"grid"`` is taken, ``"grid (1)"`` is returned; if that is also
    taken, ``"grid (2)"`` and so on.
    """
    taken = set(existing_names or ())
    name = base_name
    i = 1
    while name in taken:
        name = f"{base_name} ({i})"
        i += 1
    return name
