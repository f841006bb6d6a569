#!/usr/bin/env python3
"""Scripted Ticket Queue walkthrough"""

import sys
import os

# Add parent directory to path
sys.path.append(os.path.dirname(__file__))

from data_structures import TicketQueue
from config import load_settings, configure_logging

DEMO_TICKETS = [
    (501, "Aisha", "dubai"),
    (502, "Ahmed", "london"),
    (503, "Hina", "tronto"),
]


def run_demo(queue=None):
    """Enqueue the sample tickets, display, dequeue once, display again"""
    if queue is None:
        queue = TicketQueue()

    for ticket_number, passenger_name, destination in DEMO_TICKETS:
        queue.enqueue(ticket_number, passenger_name, destination)

    print("original queue:")
    queue.display()
    queue.dequeue()
    print("after one dequeue:")
    queue.display()
    return queue


def main():
    settings = load_settings()
    configure_logging(settings)
    run_demo(TicketQueue(settings.queue_capacity))


if __name__ == "__main__":
    main()
