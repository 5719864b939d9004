from collections.abc import Sequence
from typing import Any


def iter_repr(v: Sequence[Any], max_items: int = 20) -> str:
    shown = ", ".join(repr(item) for item in v[:max_items])
    if len(v) > max_items:
        return f"{shown}, ..." if shown else "..."
    return shown
