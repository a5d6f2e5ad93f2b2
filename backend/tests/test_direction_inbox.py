"""
Tests for the single-slot direction inbox.
"""

import os
import sys
import threading

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT  # noqa: E402
from services.direction_inbox import DirectionInbox  # noqa: E402


def test_offer_then_take_empties_slot():
    inbox = DirectionInbox()

    assert inbox.offer(UP, current=RIGHT) is True
    assert inbox.pending is UP
    assert inbox.take() is UP
    assert inbox.take() is None


def test_reversal_is_dropped():
    inbox = DirectionInbox()

    assert inbox.offer(LEFT, current=RIGHT) is False
    assert inbox.offer(UP, current=DOWN) is False
    assert inbox.pending is None


def test_first_valid_request_wins():
    inbox = DirectionInbox()

    assert inbox.offer(DOWN, current=RIGHT) is True
    assert inbox.offer(UP, current=RIGHT) is False
    assert inbox.take() is DOWN


def test_same_direction_occupies_slot():
    inbox = DirectionInbox()

    assert inbox.offer(RIGHT, current=RIGHT) is True
    assert inbox.offer(UP, current=RIGHT) is False


def test_clear():
    inbox = DirectionInbox()
    inbox.offer(UP, current=RIGHT)

    inbox.clear()

    assert inbox.pending is None


def test_concurrent_offers_accept_exactly_one():
    inbox = DirectionInbox()
    barrier = threading.Barrier(16)
    accepted = []
    lock = threading.Lock()

    def producer(direction):
        barrier.wait()
        if inbox.offer(direction, current=RIGHT):
            with lock:
                accepted.append(direction)

    threads = [
        threading.Thread(target=producer, args=(UP if i % 2 else DOWN,))
        for i in range(16)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(accepted) == 1
    assert inbox.take() is accepted[0]
