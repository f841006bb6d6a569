"""Core data structures for the Ticket Queue"""
import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10


class TicketQueueError(Exception):
    """Base class for ticket queue conditions"""


class QueueFull(TicketQueueError):
    """Raised when enqueue is attempted with no slots left"""
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"Queue is full (capacity {capacity})")


class QueueEmpty(TicketQueueError):
    """Raised when dequeue is attempted on an empty queue"""
    def __init__(self):
        super().__init__("Queue is empty")


class TicketRecord(BaseModel):
    """A single ticket entry"""
    model_config = ConfigDict(frozen=True)

    ticket_number: int
    passenger_name: str
    destination: str

    def __str__(self):
        return f"{self.ticket_number}-{self.passenger_name}-{self.destination}"


class TicketQueue:
    """Bounded ticket queue over preallocated slots.

    ``front`` and ``rear`` delimit the present records. Dequeue only moves
    ``front`` forward; slots are never cleared or reused, so capacity is
    consumed once per enqueue for the life of the queue.
    """
    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.slots: List[Optional[TicketRecord]] = [None] * capacity
        self.front = 0
        self.rear = -1

    def enqueue(self, ticket_number: int, passenger_name: str, destination: str) -> TicketRecord:
        """Append a ticket at the rear"""
        if self.rear >= self.capacity - 1:
            logger.warning(f"Rejected ticket {ticket_number}: no slots left of {self.capacity}")
            raise QueueFull(self.capacity)

        record = TicketRecord(
            ticket_number=ticket_number,
            passenger_name=passenger_name,
            destination=destination
        )
        self.rear += 1
        self.slots[self.rear] = record
        logger.debug(f"Enqueued {record} at slot {self.rear}")
        return record

    def dequeue(self) -> TicketRecord:
        """Remove and return the front ticket"""
        if self.is_empty():
            logger.warning("Dequeue on empty queue")
            raise QueueEmpty()

        record = self.slots[self.front]
        self.front += 1
        logger.debug(f"Dequeued {record}, front now {self.front}")
        return record

    def peek(self) -> Optional[TicketRecord]:
        """Get front ticket without removing"""
        if not self.is_empty():
            return self.slots[self.front]
        return None

    def is_empty(self) -> bool:
        return self.front > self.rear

    def is_full(self) -> bool:
        """True once every slot has been used"""
        return self.rear == self.capacity - 1

    def size(self) -> int:
        return self.rear - self.front + 1

    def remaining(self) -> int:
        """Enqueues still possible"""
        return self.capacity - 1 - self.rear

    def get_all(self) -> List[TicketRecord]:
        """Get present tickets, front to rear"""
        return self.slots[self.front:self.rear + 1]

    def listing(self) -> List[str]:
        """Numbered display lines for present tickets"""
        return [f"[{count}]{record}" for count, record in enumerate(self.get_all(), 1)]

    def display(self):
        """Print present tickets, front to rear"""
        for line in self.listing():
            print(line)

    def __len__(self):
        return self.size()
