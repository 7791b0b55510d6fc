import unique64


def test_create_allocator():
    alloc = unique64.create_allocator()
    assert isinstance(alloc, unique64.Unique64)
    assert alloc.stats() == unique64.Unique64().stats()
    assert alloc.allocate() == 0


def test_create_allocator_returns_independent_instances():
    a = unique64.create_allocator()
    b = unique64.create_allocator()
    assert a.allocate() == 0
    assert a.allocate() == 1
    assert b.allocate() == 0
