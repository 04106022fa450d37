from __future__ import annotations
import logging
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ("value", "next")
    def __init__(self, s: str):
        self.value: str = s
        self.next: Optional["_Node"] = None


def _allocate_node(s: Optional[str]) -> Optional[_Node]:
    """Return a fresh node holding `s`, or None if `s` is unusable or memory runs out.

    Only non-empty `str` payloads are accepted; `bytes` is turned away too so
    that `sort` never has to compare mixed types.
    """
    if not isinstance(s, str) or not s:
        logger.debug("rejecting payload %r", s)
        return None
    try:
        return _Node(s)
    except MemoryError:
        logger.debug("could not allocate node for %d-char payload", len(s))
        return None


class Queue:
    def __init__(self):
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size: int = 0

    # ---- basics ----
    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        n = self._head
        while n is not None:
            nxt = n.next
            n.next = None
            n = nxt
        self._head = self._tail = None
        self._size = 0

    # ---- insert/remove ----
    def insert_head(self, s: Optional[str]) -> bool:
        n = _allocate_node(s)
        if n is None:
            return False
        n.next = self._head
        self._head = n
        if self._tail is None:
            self._tail = n
        self._size += 1
        return True

    def insert_tail(self, s: Optional[str]) -> bool:
        n = _allocate_node(s)
        if n is None:
            return False
        if self._tail is None:
            self._head = self._tail = n
        else:
            self._tail.next = n
            self._tail = n
        self._size += 1
        return True

    def remove_head(self, bufsize: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """Detach the head node and hand back its payload.

        With `bufsize` the payload is cut to at most ``bufsize - 1`` characters,
        leaving room for a terminator the way a fixed buffer would.
        """
        if self._head is None:
            return False, None
        n = self._head
        self._head = n.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        value = n.value
        if bufsize is not None:
            value = value[:max(bufsize - 1, 0)]
        n.next = None
        return True, value

    # ---- access ----
    def front(self) -> str:
        if self._head is None:
            raise IndexError("front from empty queue")
        return self._head.value

    def back(self) -> str:
        if self._tail is None:
            raise IndexError("back from empty queue")
        return self._tail.value

    # ---- reorder ----
    def reverse(self) -> None:
        if self._head is None:
            return
        prev: Optional[_Node] = None
        cur = self._head
        self._tail = self._head
        while cur is not None:
            nxt = cur.next
            cur.next = prev
            prev = cur
            cur = nxt
        self._head = prev

    def sort(self) -> None:
        """Stable ascending sort, case-insensitive, done by relinking nodes only."""
        if self._size < 2:
            return
        self._head = _merge_sort(self._head)
        n = self._head
        assert n is not None
        while n.next is not None:
            n = n.next
        self._tail = n

    # ---- utils ----
    def __iter__(self) -> Iterator[str]:
        n = self._head
        while n is not None:
            yield n.value
            n = n.next

    def to_list(self) -> List[str]:
        return list(self)

    def __repr__(self) -> str:
        return f"Queue({self.to_list()!r})"


# ---- merge sort over the chain ----

def _split(head: _Node) -> _Node:
    # slow stops on the last node of the left half
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    right = slow.next
    slow.next = None
    return right


def _take_left(left: _Node, right: _Node) -> bool:
    return left.value.lower() <= right.value.lower()


def _merge(left: _Node, right: _Node) -> _Node:
    if _take_left(left, right):
        head, left = left, left.next
    else:
        head, right = right, right.next
    last = head
    while left is not None and right is not None:
        if _take_left(left, right):
            last.next = left
            left = left.next
        else:
            last.next = right
            right = right.next
        last = last.next
    last.next = left if left is not None else right
    return head


def _merge_sort(head: Optional[_Node]) -> Optional[_Node]:
    if head is None or head.next is None:
        return head
    right = _split(head)
    return _merge(_merge_sort(head), _merge_sort(right))


# ---- functional API; None stands for an absent queue ----

def q_new() -> Optional[Queue]:
    try:
        return Queue()
    except MemoryError:
        logger.debug("could not allocate queue")
        return None


def q_free(q: Optional[Queue]) -> None:
    if q is None:
        return
    q.clear()


def q_insert_head(q: Optional[Queue], s: Optional[str]) -> bool:
    if q is None:
        return False
    return q.insert_head(s)


def q_insert_tail(q: Optional[Queue], s: Optional[str]) -> bool:
    if q is None:
        return False
    return q.insert_tail(s)


def q_remove_head(q: Optional[Queue], bufsize: Optional[int] = None) -> Tuple[bool, Optional[str]]:
    if q is None:
        return False, None
    return q.remove_head(bufsize)


def q_size(q: Optional[Queue]) -> int:
    if q is None:
        return 0
    return q.size()


def q_reverse(q: Optional[Queue]) -> None:
    if q is not None:
        q.reverse()


def q_sort(q: Optional[Queue]) -> None:
    if q is not None:
        q.sort()
