from __future__ import annotations

import functools
import logging
import operator
from typing import Optional
from typing import Set

from typing_extensions import SupportsIndex
from typing_extensions import TypedDict

from ._utils import log_obj
from .errors import Unique64Error

_logger = logging.getLogger(__name__)
_log_obj = functools.partial(log_obj, _logger)

# The largest id that fits into an unsigned 64-bit integer.
# `next_id == MAX_ID + 1` means the counter is exhausted.
MAX_ID = 2**64 - 1


class AllocStats(TypedDict):
    next_id: int
    released: int
    active: int


# An allocator of unsigned 64-bit integer ids which recycles released ids.
#
# It consumes memory proportional to the number of released ids that were not
# handed out again yet, never to the number of ids issued so far:
# - `_next_id` is the smallest id that was never issued,
# - `_released` is the set of ids lower than `_next_id` that are free again.
# An id is in use iff it is lower than `_next_id` and not in `_released`.
#
# There is no reset, throw the allocator away and create a new one instead.
# Not safe for concurrent use, callers sharing it between threads must lock.
class Unique64:
    _next_id: int
    _released: Set[int]

    def __init__(self) -> None:
        self._next_id = 0
        self._released = set()

    def __repr__(self) -> str:
        return "<%s at %#x next_id=%d released=%d>" % (
            self.__class__.__name__,
            id(self),
            self._next_id,
            len(self._released),
        )

    _log = functools.partial(_log_obj)
    _dbg = functools.partialmethod(_log, logging.DEBUG)
    _err = functools.partialmethod(_log, logging.ERROR)

    # Returns an id that was free, and marks it as used.
    def allocate(self) -> int:
        if self._released:
            # any released id will do, callers must not rely on the order
            free_id = self._released.pop()
            self._dbg("recycled id %d", free_id)
            return free_id

        # nothing to recycle, so all ids lower than `_next_id` are in use and
        # `_next_id` is the fresh one
        if self._next_id > MAX_ID:
            raise OverflowError(
                f"All {MAX_ID + 1} ids have been issued and none was released"
            )
        free_id = self._next_id
        self._next_id += 1
        return free_id

    # Marks an id returned by `allocate()` as free again.
    def release(self, used_id: SupportsIndex) -> None:
        some_id = _as_id(used_id)
        reason = self._inactive_reason(some_id)
        if reason is not None:
            self._err("rejected release of id %d: %s", some_id, reason)
            raise Unique64Error(
                f"Cannot release id {some_id}, it {reason}", "INVALID_RELEASE"
            )

        self._released.add(some_id)
        self._dbg("released id %d", some_id)

    def is_active(self, some_id: SupportsIndex) -> bool:
        return self._inactive_reason(_as_id(some_id)) is None

    __contains__ = is_active

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def released_count(self) -> int:
        return len(self._released)

    @property
    def active_count(self) -> int:
        return self._next_id - len(self._released)

    def stats(self) -> AllocStats:
        return {
            "next_id": self._next_id,
            "released": len(self._released),
            "active": self.active_count,
        }

    def _inactive_reason(self, some_id: int) -> Optional[str]:
        if some_id < 0 or some_id > MAX_ID:
            return "is outside of the unsigned 64-bit range"
        if some_id >= self._next_id:
            return "was never issued"
        if some_id in self._released:
            return "was already released"
        return None


# Accepts anything usable as an index (e.g. `numpy.uint64`), except `bool`.
def _as_id(value: SupportsIndex) -> int:
    if isinstance(value, bool):
        raise TypeError("Ids must be integers, but got bool")
    return operator.index(value)
