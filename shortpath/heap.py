"""
Indexed binary min-heap over node indices.

The heap owns its array, the key of each queued node and the inverse map
from node to array position, so decrease-key runs in O(log n) without any
lookup structure outside the heap. Searches use it as their open set.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 6.5 (Priority queues).
"""

from typing import List, Tuple

import numpy as np

NOT_QUEUED = -1


class IndexedMinHeap:
    """
    Binary min-heap of node indices in ``[0, capacity)`` ordered by key.

    After every push, pop or decrease_key, ``position[node]`` equals the
    node's index in the heap array for queued nodes and NOT_QUEUED for all
    other nodes. Ties between equal keys are left in heap order.

    Complexity:
        - push, pop, decrease_key: O(log n)
        - peek, key, __contains__: O(1)
        - clear: O(capacity)

    Example:
        >>> h = IndexedMinHeap(3)
        >>> h.push(0, 5.0)
        >>> h.push(2, 1.0)
        >>> h.decrease_key(0, 0.5)
        >>> h.pop()
        0
    """

    def __init__(self, capacity: int):
        self._heap: List[int] = []
        self._pos = np.full(capacity, NOT_QUEUED, dtype=np.int64)
        self._key = np.zeros(capacity, dtype=np.float64)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, node: int) -> bool:
        return bool(self._pos[node] != NOT_QUEUED)

    def position(self, node: int) -> int:
        """Array position of node, NOT_QUEUED if it is not on the heap."""
        return int(self._pos[node])

    def key(self, node: int) -> float:
        return float(self._key[node])

    def clear(self) -> None:
        self._heap.clear()
        self._pos.fill(NOT_QUEUED)

    def push(self, node: int, key: float) -> None:
        """
        Add node with the given key.

        Raises:
            ValueError: If node is already queued.
        """
        if self._pos[node] != NOT_QUEUED:
            raise ValueError(f"Node {node} is already queued")
        self._key[node] = key
        self._heap.append(node)
        self._pos[node] = len(self._heap) - 1
        self._up(len(self._heap) - 1)

    def peek(self) -> int:
        """
        Return the node with minimum key without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._heap:
            raise IndexError("peek from empty heap")
        return self._heap[0]

    def pop(self) -> int:
        """
        Remove and return the node with minimum key.

        Raises:
            IndexError: If the heap is empty.
        """
        h = self._heap
        if not h:
            raise IndexError("pop from empty heap")
        top = h[0]
        last = h.pop()
        self._pos[top] = NOT_QUEUED
        if h:
            h[0] = last
            self._pos[last] = 0
            self._down(0)
        return top

    def decrease_key(self, node: int, key: float) -> None:
        """
        Lower the key of a queued node and restore heap order.

        Raises:
            KeyError: If node is not queued.
        """
        i = self._pos[node]
        if i == NOT_QUEUED:
            raise KeyError(f"Node {node} is not queued")
        self._key[node] = key
        self._up(int(i))

    def _less(self, i: int, j: int) -> bool:
        h = self._heap
        return self._key[h[i]] < self._key[h[j]]

    def _swap(self, i: int, j: int) -> None:
        h = self._heap
        h[i], h[j] = h[j], h[i]
        self._pos[h[i]] = i
        self._pos[h[j]] = j

    def _up(self, j: int) -> None:
        while j > 0:
            i = (j - 1) // 2
            if not self._less(j, i):
                break
            self._swap(i, j)
            j = i

    def _down(self, i: int) -> None:
        n = len(self._heap)
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            j = left
            right = left + 1
            if right < n and self._less(right, left):
                j = right
            if not self._less(j, i):
                break
            self._swap(i, j)
            i = j

    def check(self) -> Tuple[bool, str]:
        """
        Verify heap order and the position bookkeeping.

        Returns:
            (True, "") if consistent, otherwise (False, description of the
            first inconsistency found).
        """
        h = self._heap
        for i, node in enumerate(h):
            if self._pos[node] != i:
                return False, f"position[{node}] = {self._pos[node]}, heap index is {i}"
            if i > 0 and self._less(i, (i - 1) // 2):
                return False, f"node {node} at {i} has key below its parent"
        queued = int(np.count_nonzero(self._pos != NOT_QUEUED))
        if queued != len(h):
            return False, f"{queued} nodes have positions but heap holds {len(h)}"
        return True, ""
