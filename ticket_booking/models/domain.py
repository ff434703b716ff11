from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Train:
    train_id: str
    train_no: str
    seats: List[List[int]] = field(default_factory=list)
    station_times: Dict[str, str] = field(default_factory=dict)
    stations: List[str] = field(default_factory=list)

    def get_train_info(self) -> str:
        return f"Train ID: {self.train_id} Train No: {self.train_no}"

    def available_seat_count(self) -> int:
        return sum(1 for row in self.seats for seat in row if seat == 0)

    def is_seat_available(self, row: int, seat: int) -> bool:
        if row < 0 or row >= len(self.seats):
            return False
        if seat < 0 or seat >= len(self.seats[row]):
            return False
        return self.seats[row][seat] == 0

    def serves(self, source: str, destination: str) -> bool:
        """True when the route visits source before destination."""
        if source not in self.stations or destination not in self.stations:
            return False
        return self.stations.index(source) < self.stations.index(destination)


@dataclass
class Ticket:
    ticket_id: str
    user_id: str
    source: str
    destination: str
    date_of_travel: str
    train: Optional[Train] = None

    def get_ticket_info(self) -> str:
        return (
            f"Ticket ID: {self.ticket_id} belongs to User {self.user_id} "
            f"from {self.source} to {self.destination} on {self.date_of_travel}"
        )


@dataclass
class User:
    name: str
    hashed_password: str
    user_id: str
    tickets_booked: List[Ticket] = field(default_factory=list)
    password: Optional[str] = None

    def add_ticket(self, ticket: Ticket) -> None:
        self.tickets_booked.append(ticket)

    def find_ticket(self, ticket_id: str) -> Optional[Ticket]:
        for ticket in self.tickets_booked:
            if ticket.ticket_id == ticket_id:
                return ticket
        return None

    def remove_ticket(self, ticket_id: str) -> bool:
        ticket = self.find_ticket(ticket_id)
        if ticket is None:
            return False
        self.tickets_booked.remove(ticket)
        return True

    def print_tickets(self) -> List[str]:
        return [ticket.get_ticket_info() for ticket in self.tickets_booked]
