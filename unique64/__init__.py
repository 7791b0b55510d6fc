from .alloc import (
    AllocStats,
    MAX_ID,
    Unique64,
)
from .create_allocator import create_allocator
from .errors import Unique64Error
