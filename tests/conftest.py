"""Shared fixtures for ticket queue tests."""

import pytest

from data_structures import TicketQueue


@pytest.fixture
def queue():
    """An empty queue with the default capacity."""
    return TicketQueue()


@pytest.fixture
def demo_queue():
    """A queue holding the three sample tickets."""
    q = TicketQueue()
    q.enqueue(501, "Aisha", "dubai")
    q.enqueue(502, "Ahmed", "london")
    q.enqueue(503, "Hina", "tronto")
    return q


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with answers taken in order."""
    def _feed(*answers):
        answers_iter = iter(answers)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers_iter))
    return _feed
