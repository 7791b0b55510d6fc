import logging
import os

import unique64


def main():
    if os.getenv("DEBUG"):
        logging.basicConfig(level=logging.DEBUG)

    alloc = unique64.create_allocator()
    handles = [alloc.allocate() for _ in range(5)]
    print("allocated", handles)

    alloc.release(handles[1])
    alloc.release(handles[3])
    print("after release:", alloc.stats())

    print("reused", alloc.allocate(), alloc.allocate())
    print("fresh", alloc.allocate())

    try:
        alloc.release(100)
    except unique64.Unique64Error as e:
        print("error:", e.code, e.explanation)


main()
