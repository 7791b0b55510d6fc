import pytest

import unique64


@pytest.fixture
def alloc():
    return unique64.Unique64()


@pytest.fixture
def alloc_1000(alloc):
    for _ in range(1000):
        alloc.allocate()
    return alloc
