"""Bounded FIFO queue persisted entirely in a prefs store."""

from __future__ import annotations

import logging

from playerprefs.api.errors import QueueEmptyError, QueueFullError
from playerprefs.api.store import PrefsStore
from playerprefs.values.primitives import PrefsInt
from playerprefs.values.simple import SimplePrefsValue

logger = logging.getLogger(__name__)

INSERT_INDEX_FULL = -1


class PrefsQueue[K]:
    """Circular queue whose cursors and elements are independent prefs keys.

    Layout under `key_prefix`:
      `<prefix>:insertIndex`  next slot to write, or -1 when full
      `<prefix>:fetchIndex`   next slot to read
      `<prefix>:item:<n>`     element in slot n, present only while occupied

    Empty and full both have equal cursors in a plain two-cursor ring, so the
    insert cursor switches to the -1 sentinel on the enqueue that fills the last
    slot and is restored to the freed slot by the next dequeue.

    Construction raises `ValueError` when the stored cursors do not fit `length`,
    which happens when a prefix is reused with a different length.

    Not safe for concurrent use of one prefix; cursor and item writes are
    separate store calls with no transaction across them.
    """

    def __init__(
        self,
        value_type: type[SimplePrefsValue[K]],
        key_prefix: str,
        length: int,
        *,
        store: PrefsStore | None = None,
    ) -> None:
        if length <= 0:
            raise ValueError("length must be > 0")
        self._value_type = value_type
        self._key_prefix = key_prefix
        self._length = int(length)
        self._store = store
        self._insert_index = PrefsInt(f"{key_prefix}:insertIndex", 0, store=store)
        self._fetch_index = PrefsInt(f"{key_prefix}:fetchIndex", 0, store=store)
        self._check_cursor_bounds()

    @property
    def key_prefix(self) -> str:
        return self._key_prefix

    @property
    def length(self) -> int:
        return self._length

    @property
    def count(self) -> int:
        insert_index = self._insert_index.value
        if insert_index == INSERT_INDEX_FULL:
            return self._length
        return (insert_index - self._fetch_index.value) % self._length

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def is_full(self) -> bool:
        return self._insert_index.value == INSERT_INDEX_FULL

    def __len__(self) -> int:
        return self.count

    def enqueue(self, item: K) -> None:
        """Append item at the tail; raises `QueueFullError` when no slot is free."""
        insert_index = self._insert_index.value
        if insert_index == INSERT_INDEX_FULL:
            raise QueueFullError(self._key_prefix, self._length)

        self._item_value(insert_index).value = item
        next_index = self._next_index(insert_index)
        self._insert_index.value = next_index
        if next_index == self._fetch_index.value:
            self._insert_index.value = INSERT_INDEX_FULL
        logger.debug(
            "prefs_queue_enqueue prefix=%s slot=%d count=%d",
            self._key_prefix,
            insert_index,
            self.count,
        )

    def dequeue(self) -> K:
        """Remove and return the head item; raises `QueueEmptyError` when empty."""
        if self.count == 0:
            raise QueueEmptyError(self._key_prefix, self._length)

        fetch_index = self._fetch_index.value
        item_value = self._item_value(fetch_index)
        result = item_value.value
        item_value.delete()
        was_full = self._insert_index.value == INSERT_INDEX_FULL
        self._fetch_index.value = self._next_index(fetch_index)
        if was_full:
            self._insert_index.value = fetch_index
        logger.debug(
            "prefs_queue_dequeue prefix=%s slot=%d count=%d",
            self._key_prefix,
            fetch_index,
            self.count,
        )
        return result

    def peek(self) -> K:
        """Return the head item without removing it."""
        if self.count == 0:
            raise QueueEmptyError(self._key_prefix, self._length)
        return self._item_value(self._fetch_index.value).value

    def snapshot(self) -> list[K]:
        """Return queued items in FIFO order without mutating the queue."""
        start = self._fetch_index.value
        return [
            self._item_value((start + offset) % self._length).value
            for offset in range(self.count)
        ]

    def clear(self) -> None:
        """Delete every item slot under the prefix and reset both cursors."""
        for index in range(self._length):
            item_value = self._item_value(index)
            if item_value.is_set:
                item_value.delete()
        self._insert_index.value = 0
        self._fetch_index.value = 0
        logger.debug("prefs_queue_cleared prefix=%s length=%d", self._key_prefix, self._length)

    def item_key(self, index: int) -> str:
        """Return the store key of one item slot."""
        return f"{self._key_prefix}:item:{index}"

    def _item_value(self, index: int) -> SimplePrefsValue[K]:
        # Fresh instance per access: a cached instance could hold a slot's previous value.
        return self._value_type(self.item_key(index), None, store=self._store)

    def _next_index(self, index: int) -> int:
        return (index + 1) % self._length

    def _check_cursor_bounds(self) -> None:
        insert_index = self._insert_index.value
        fetch_index = self._fetch_index.value
        insert_ok = insert_index == INSERT_INDEX_FULL or 0 <= insert_index < self._length
        if insert_ok and 0 <= fetch_index < self._length:
            return
        logger.warning(
            "prefs_queue_cursor_out_of_bounds prefix=%s length=%d insert_index=%d fetch_index=%d",
            self._key_prefix,
            self._length,
            insert_index,
            fetch_index,
        )
        raise ValueError(
            f"stored cursors for {self._key_prefix!r} (insert={insert_index}, fetch={fetch_index}) "
            f"do not fit length {self._length}"
        )

    def __repr__(self) -> str:
        return f"PrefsQueue(key_prefix={self._key_prefix!r}, length={self._length}, count={self.count})"
