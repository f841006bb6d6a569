#!/usr/bin/env python3
"""Terminal-based Ticket Queue"""

import sys
import os
import logging

# Add parent directory to path
sys.path.append(os.path.dirname(__file__))

from data_structures import TicketQueue, QueueFull, QueueEmpty
from config import load_settings, configure_logging

logger = logging.getLogger(__name__)


class TicketQueueTerminal:
    def __init__(self, queue=None):
        self.queue = queue if queue is not None else TicketQueue()

    def clear_screen(self):
        """Clear terminal screen"""
        os.system('clear' if os.name != 'nt' else 'cls')

    def print_header(self, title):
        """Print formatted header"""
        print("\n" + "="*60)
        print(f"  {title}")
        print("="*60)

    def enqueue_ticket(self):
        """Add a ticket at the rear"""
        self.print_header("ENQUEUE TICKET")

        try:
            ticket_number = int(input("Ticket Number: "))
        except ValueError:
            print("\n✗ Invalid ticket number")
            input("\nPress Enter to continue...")
            return

        passenger_name = input("Passenger Name: ").strip()
        destination = input("Destination: ").strip()

        try:
            record = self.queue.enqueue(ticket_number, passenger_name, destination)
            print(f"\n✓ Ticket {record} added at position {self.queue.size()}")
        except QueueFull as e:
            print(f"\n✗ {e}")
        finally:
            input("\nPress Enter to continue...")

    def dequeue_ticket(self):
        """Remove the front ticket"""
        self.print_header("DEQUEUE TICKET")

        try:
            record = self.queue.dequeue()
            print(f"\n✓ Removed ticket {record}")
        except QueueEmpty as e:
            print(f"\n✗ {e}")

        input("\nPress Enter to continue...")

    def display_queue(self):
        """Display present tickets"""
        self.print_header("TICKET QUEUE")

        if self.queue.is_empty():
            print("\nQueue is empty")
        else:
            print()
            self.queue.display()

        input("\nPress Enter to continue...")

    def queue_status(self):
        """Show queue counters"""
        self.print_header("QUEUE STATUS")

        front = self.queue.peek()
        print(f"\n{'Tickets':<12} {self.queue.size()}")
        print(f"{'Capacity':<12} {self.queue.capacity}")
        print(f"{'Remaining':<12} {self.queue.remaining()}")
        print(f"{'Front':<12} {front if front is not None else '-'}")

        input("\nPress Enter to continue...")

    def main_menu(self):
        """Main entry menu"""
        while True:
            self.clear_screen()
            self.print_header("TICKET QUEUE")

            print("\n1. Enqueue Ticket")
            print("2. Dequeue Ticket")
            print("3. Display Queue")
            print("4. Queue Status")
            print("5. Exit")

            choice = input("\nEnter choice: ").strip()

            if choice == '1':
                self.enqueue_ticket()
            elif choice == '2':
                self.dequeue_ticket()
            elif choice == '3':
                self.display_queue()
            elif choice == '4':
                self.queue_status()
            elif choice == '5':
                print("\nThank you for using Ticket Queue!")
                break
            else:
                print("\n✗ Invalid choice")
                input("\nPress Enter to continue...")


def main():
    settings = load_settings()
    configure_logging(settings)
    logger.info(f"Starting terminal with capacity {settings.queue_capacity}")
    app = TicketQueueTerminal(TicketQueue(settings.queue_capacity))
    app.main_menu()


if __name__ == "__main__":
    main()
