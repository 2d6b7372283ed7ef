import threading
import time

from drivingschool.scheduling.locks import SlotLocks


def test_same_slot_is_serialised():
    locks = SlotLocks()
    active = []
    overlaps = []

    def worker():
        with locks.hold('2024-06-01', '10:00'):
            active.append(1)
            if len(active) > 1:
                overlaps.append(True)
            time.sleep(0.01)
            active.pop()

    threads = [threading.Thread(target=worker) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert overlaps == []
    assert len(locks) == 1


def test_different_slots_do_not_block_each_other():
    locks = SlotLocks()
    with locks.hold('2024-06-01', '10:00'):
        acquired = threading.Event()

        def other_slot():
            with locks.hold('2024-06-01', '11:00'):
                acquired.set()

        thread = threading.Thread(target=other_slot)
        thread.start()
        assert acquired.wait(timeout=2)
        thread.join()
    assert len(locks) == 2
