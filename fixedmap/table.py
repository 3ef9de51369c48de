from dataclasses import dataclass, field
import operator
from typing import Any, Hashable

from .shared import printf_err, show


DEFAULT_BUFFER_CAPACITY = 30

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


_debug_trace_operations = False


def set_debug_trace_operations(b: bool):
    global _debug_trace_operations
    _debug_trace_operations = b


class CapacityError(ValueError):
    pass


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass
class Entry:
    key: Hashable
    value: Any
    # repr and == stop at this node
    next: "Entry | None" = field(default=None, repr=False, compare=False)


class FixedBucketMap:
    """Hash map with a fixed number of buckets and separate chaining.

    Every bucket is either empty (None) or the head of a singly linked
    chain of entries. The bucket count never changes, so a key always
    stays in the bucket it was first hashed into.
    """

    def __init__(self, capacity: int = DEFAULT_BUFFER_CAPACITY) -> None:
        if isinstance(capacity, bool):
            raise CapacityError(f"capacity must be an integer, got {capacity!r}")
        try:
            capacity = operator.index(capacity)
        except TypeError:
            raise CapacityError(
                f"capacity must be an integer, got {capacity!r}"
            ) from None
        if capacity <= 0:
            raise CapacityError(f"capacity must be positive, got {capacity}")

        self.count = 0
        self.buckets: list[Entry | None] = [None] * capacity

    def __len__(self) -> int:
        return self.count

    @property
    def capacity(self) -> int:
        return len(self.buckets)

    def bucket_index(self, key: Hashable) -> int:
        return hash_key(key) % len(self.buckets)

    def insert(self, key: Hashable, value: Any) -> bool:
        """Insert `key` or overwrite its value.

        Returns True if the key was not present before.
        """
        index = self.bucket_index(key)
        head = self.buckets[index]

        if head is None:
            self.buckets[index] = Entry(key, value)
            is_new_key = True
        else:
            is_new_key = self._upsert(head, key, value)

        if is_new_key:
            self.count += 1

        if _debug_trace_operations:
            printf_err(
                "insert {0:s} -> bucket {1:d} ({2:s})\n",
                show(key),
                index,
                "new" if is_new_key else "update",
            )
        return is_new_key

    def get(self, key: Hashable) -> Any | NotFound:
        index = self.bucket_index(key)
        entry = self._find_entry(self.buckets[index], key)

        if _debug_trace_operations:
            printf_err(
                "get {0:s} -> bucket {1:d} ({2:s})\n",
                show(key),
                index,
                "hit" if entry is not None else "miss",
            )

        if entry is None:
            return NotFound()
        return entry.value

    def chain(self, index: int) -> list[Entry]:
        if not 0 <= index < len(self.buckets):
            raise IndexError(f"bucket index out of range: {index}")

        entries = []
        entry = self.buckets[index]
        while entry is not None:
            entries.append(entry)
            entry = entry.next
        return entries

    def _upsert(self, head: Entry, key: Hashable, value: Any) -> bool:
        entry = head
        while True:
            if entry.key == key:
                entry.value = value
                return False
            if entry.next is None:
                entry.next = Entry(key, value)
                return True
            entry = entry.next

    def _find_entry(self, head: Entry | None, key: Hashable) -> Entry | None:
        entry = head
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None


def hash_key(key: Hashable) -> int:
    return hash(key) & _UINT64_MASK
