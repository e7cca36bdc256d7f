from collections import deque
from threading import Lock

from .util import IndexOutOfRangeError


class HistoryCache:
    '''
    Bounded record of past calculations, most recent first.

    Holds no deduplication; recording the same text twice keeps both.

    Single writer: record, promote, clear, capacity changes and snapshots all
    run under one lock, so any thread may call them.
    '''

    def __init__(self, capacity):
        self._lock = Lock()
        self._entries = deque()
        self._capacity = self._checkcapacity(capacity)

    @staticmethod
    def _checkcapacity(capacity):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError('History length must be an int, not {}'
                            .format(type(capacity).__name__))
        if capacity < 1:
            raise ValueError('History length must be at least 1, not {}'
                             .format(capacity))
        return capacity

    def _trim(self):
        # Oldest entries live at the tail.
        while len(self._entries) > self._capacity:
            self._entries.pop()

    @property
    def capacity(self):
        return self._capacity

    @capacity.setter
    def capacity(self, capacity):
        capacity = self._checkcapacity(capacity)
        with self._lock:
            self._capacity = capacity
            self._trim()

    def record(self, text):
        '''
        Push text as the most recent entry, evicting the oldest if full.
        '''
        with self._lock:
            self._entries.appendleft(text)
            self._trim()

    def promote(self, index):
        '''
        Move the entry at index to the front.

        Entries that were ahead of it shift back by one, keeping their order.
        '''
        with self._lock:
            if isinstance(index, bool) or not isinstance(index, int) or \
               not 0 <= index < len(self._entries):
                raise IndexOutOfRangeError(
                    'No history entry at index {} (have {})'
                    .format(index, len(self._entries)))
            entry = self._entries[index]
            del self._entries[index]
            self._entries.appendleft(entry)

    def clear(self):
        with self._lock:
            self._entries.clear()

    def snapshot(self):
        '''
        Return a consistent copy of the entries, most recent first.
        '''
        with self._lock:
            return list(self._entries)

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def __iter__(self):
        return iter(self.snapshot())

    def __repr__(self):
        return '{}(capacity={}, entries={!r})'.format(type(self).__name__,
                                                      self.capacity,
                                                      self.snapshot())
