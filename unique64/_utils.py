from __future__ import annotations

import logging
from typing import Optional


# Logs `msg` prefixed with `obj._log_prefix`, or with `repr(obj)` when the
# object has no such attribute. The prefix is only built if the record passes
# the logger's level.
def log_obj(
    logger: logging.Logger,
    obj: object,
    level: int,
    msg: str,
    *args: object,
    exc_info: Optional[BaseException] = None,
) -> None:
    if not logger.isEnabledFor(level):
        return
    prefix = getattr(obj, "_log_prefix", None)
    if prefix is None:
        prefix = f"{obj!r}: "
    logger.log(level, prefix + msg, *args, exc_info=exc_info)
