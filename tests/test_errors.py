import pytest

import unique64


def test_error_message_and_code():
    e = unique64.Unique64Error("Something went wrong", "SOME_CODE")
    assert isinstance(e, RuntimeError)
    assert e.code == "SOME_CODE"
    assert e.explanation == "Something went wrong"
    assert str(e) == "SOME_CODE: Something went wrong"


def test_invalid_release_error(alloc):
    alloc.allocate()
    with pytest.raises(unique64.Unique64Error) as excinfo:
        alloc.release(1)
    assert excinfo.value.code == "INVALID_RELEASE"
    assert excinfo.value.explanation == "Cannot release id 1, it was never issued"
    assert str(excinfo.value) == (
        "INVALID_RELEASE: Cannot release id 1, it was never issued"
    )
