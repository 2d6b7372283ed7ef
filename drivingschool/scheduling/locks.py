import threading
from contextlib import contextmanager

from flask import current_app


class SlotLocks:
    """
    One mutex per (date, time) slot.

    Holding a slot's lock turns "check availability, then write" into a
    single critical section for every booking that targets that slot.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks = {}

    def _lock_for(self, slot):
        with self._guard:
            lock = self._locks.get(slot)
            if lock is None:
                lock = self._locks[slot] = threading.Lock()
            return lock

    @contextmanager
    def hold(self, date, time):
        lock = self._lock_for((date, time))
        with lock:
            yield

    def __len__(self):
        return len(self._locks)


def get_slot_locks():
    return current_app.extensions['slot_locks']
