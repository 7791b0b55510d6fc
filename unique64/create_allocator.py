from __future__ import annotations

from .alloc import Unique64


def create_allocator() -> Unique64:
    return Unique64()
