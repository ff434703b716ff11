from __future__ import annotations

import logging
from getpass import getpass
from typing import Callable, List, Optional
from uuid import uuid4

from ticket_booking.cli import get_booking_service
from ticket_booking.core.config import Settings
from ticket_booking.core.security import hash_password
from ticket_booking.models.domain import Train, User
from ticket_booking.services.user_booking_service import UserBookingService

logger = logging.getLogger(__name__)

MENU = """
Choose option
1. Sign up
2. Login
3. Fetch Bookings
4. Search Trains
5. Book a Seat
6. Cancel my Booking
7. Exit the App"""


class BookingShell:
    """Interactive menu over UserBookingService. I/O callables are injectable for tests."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        input_fn: Callable[[str], str] = input,
        password_fn: Callable[[str], str] = getpass,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.settings = settings
        self.input = input_fn
        self.password = password_fn
        self.output = output_fn
        self.service: UserBookingService = get_booking_service(settings=settings)
        self.logged_in = False
        self.last_search: List[Train] = []
        self.last_route: tuple[str, str] | None = None

    def run(self) -> None:
        self.output(f"Running {self.service.settings.app_name}")
        while True:
            self.output(MENU)
            choice = self.input("> ").strip()
            if choice == "7":
                self.output("Goodbye")
                return
            handler = self._handlers().get(choice)
            if handler is None:
                self.output("Invalid option")
                continue
            handler()

    def _handlers(self) -> dict:
        return {
            "1": self.sign_up,
            "2": self.login,
            "3": self.fetch_bookings,
            "4": self.search_trains,
            "5": self.book_seat,
            "6": self.cancel_booking,
        }

    def sign_up(self) -> None:
        name = self.input("Enter the username to signup: ").strip()
        password = self.password("Enter the password to signup: ")
        new_user = User(
            name=name,
            hashed_password=hash_password(password),
            user_id=str(uuid4()),
        )
        if self.service.sign_up(new_user):
            self.output(f"User {name} signed up")
        else:
            self.output("Sign up failed: could not save user")

    def login(self) -> None:
        name = self.input("Enter the username to Login: ").strip()
        password = self.password("Enter the password to Login: ")
        session_user = User(name=name, hashed_password="", user_id="", password=password)
        service = get_booking_service(user=session_user, settings=self.settings)
        if not service.login():
            self.output("Invalid username or password")
            return
        self.service = service
        self.logged_in = True
        self.output(f"Welcome {name}")

    def fetch_bookings(self) -> None:
        if not self._require_login():
            return
        lines = self.service.fetch_bookings()
        if not lines:
            self.output("No bookings found")
        for line in lines:
            self.output(line)

    def search_trains(self) -> None:
        source = self.input("Type your source station: ").strip().lower()
        destination = self.input("Type your destination station: ").strip().lower()
        self.last_search = self.service.get_trains(source, destination)
        self.last_route = (source, destination)
        if not self.last_search:
            self.output("No trains found")
            return
        for index, train in enumerate(self.last_search, start=1):
            self.output(f"{index}. {train.get_train_info()}")
            for station, time in train.station_times.items():
                self.output(f"   {station} {time}")

    def book_seat(self) -> None:
        if not self._require_login():
            return
        if not self.last_search:
            self.output("Search for trains before booking")
            return
        train = self._select_train()
        if train is None:
            return
        self.output("Select a seat out of these seats (0 = free, 1 = booked)")
        for row in self.service.fetch_seats(train):
            self.output(" ".join(str(seat) for seat in row))
        try:
            row = int(self.input("Enter the row: "))
            seat = int(self.input("Enter the column: "))
        except ValueError:
            self.output("Row and column must be numbers")
            return
        date_of_travel = self.input("Enter the date of travel: ").strip()
        source, destination = self.last_route or (None, None)
        ticket = self.service.book_seat(
            train, row, seat, date_of_travel, source=source, destination=destination
        )
        if ticket is None:
            self.output("Can't book this seat")
            return
        self.output(f"Booked! Enjoy your journey. Ticket ID: {ticket.ticket_id}")

    def cancel_booking(self) -> None:
        if not self._require_login():
            return
        ticket_id = self.input("Enter the ticket id to cancel: ").strip()
        if self.service.cancel_booking(ticket_id):
            self.output(f"Ticket with ID {ticket_id} has been canceled.")
        else:
            self.output(f"No ticket found with ID {ticket_id}")

    def _select_train(self) -> Optional[Train]:
        raw = self.input("Select a train by typing 1, 2, 3...: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            index = -1
        if index < 0 or index >= len(self.last_search):
            self.output("Invalid train selection")
            return None
        return self.last_search[index]

    def _require_login(self) -> bool:
        if not self.logged_in:
            self.output("Please login first")
        return self.logged_in
