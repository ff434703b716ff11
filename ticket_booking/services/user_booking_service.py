import logging
from typing import List, Optional
from uuid import uuid4

from ticket_booking.core.config import Settings, settings as default_settings
from ticket_booking.core.exceptions import StorageError
from ticket_booking.core.security import verify_password
from ticket_booking.models.domain import Ticket, Train, User
from ticket_booking.models.schemas import TrainSchema
from ticket_booking.services.train_service import TrainService
from ticket_booking.storage.repository import JsonTrainRepository, JsonUserRepository

logger = logging.getLogger(__name__)


class UserBookingService:
    """
    Session-level booking operations for a single user.

    The full user collection is read once at construction and written back in
    full whenever it changes. A corrupt store raises CorruptStoreError here.
    """

    def __init__(
        self,
        user_repository: JsonUserRepository,
        train_repository: JsonTrainRepository,
        user: Optional[User] = None,
        settings: Optional[Settings] = None,
    ):
        self.user_repository = user_repository
        self.train_repository = train_repository
        self.user = user
        self.settings = settings or default_settings
        self.users: List[User] = user_repository.load_all()

    def _find_session_record(self) -> Optional[User]:
        if self.user is None:
            return None
        for record in self.users:
            if record.name == self.user.name and verify_password(
                self.user.password, record.hashed_password
            ):
                return record
        return None

    def _save_users(self) -> bool:
        try:
            self.user_repository.save_all(self.users)
        except OSError as exc:
            logger.error("Failed to persist users: %s", exc)
            return False
        return True

    def login(self) -> bool:
        return self._find_session_record() is not None

    def sign_up(self, new_user: User) -> bool:
        self.users.append(new_user)
        saved = self._save_users()
        if saved:
            logger.info("Signed up user %s", new_user.name)
        return saved

    def fetch_bookings(self) -> List[str]:
        record = self._find_session_record()
        if record is None:
            return []
        lines = record.print_tickets()
        for line in lines:
            logger.info(line)
        return lines

    def cancel_booking(self, ticket_id: Optional[str]) -> bool:
        if not ticket_id:
            logger.warning("Ticket ID cannot be null or empty.")
            return False
        removed = self.user is not None and self.user.remove_ticket(ticket_id)
        if self.settings.persist_cancellations:
            # Tickets from earlier sessions only live on the stored record.
            record = self._find_session_record()
            if record is not None and record is not self.user:
                removed = record.remove_ticket(ticket_id) or removed
            if removed:
                self._save_users()
        if not removed:
            logger.info("No ticket found with ID %s", ticket_id)
            return False
        logger.info("Ticket with ID %s has been canceled.", ticket_id)
        return True

    def get_trains(self, source: str, destination: str) -> List[Train]:
        try:
            train_service = TrainService(repository=self.train_repository)
        except (StorageError, OSError) as exc:
            logger.warning("Train catalog unavailable: %s", exc)
            return []
        return train_service.search_trains(source, destination)

    def fetch_seats(self, train: Train) -> List[List[int]]:
        return train.seats

    def book_seat(
        self,
        train: Train,
        row: int,
        seat: int,
        date_of_travel: str,
        source: Optional[str] = None,
        destination: Optional[str] = None,
    ) -> Optional[Ticket]:
        record = self._find_session_record()
        if record is None:
            logger.warning("Booking refused: session is not authenticated")
            return None
        try:
            train_service = TrainService(repository=self.train_repository)
            if not train_service.book_seat(train, row, seat):
                logger.info("Seat %d/%d on train %s is not available", row, seat, train.train_id)
                return None
        except (StorageError, OSError) as exc:
            logger.error("Failed to update train %s: %s", train.train_id, exc)
            return None

        ticket = Ticket(
            ticket_id=str(uuid4()),
            user_id=record.user_id,
            source=source or (train.stations[0] if train.stations else ""),
            destination=destination or (train.stations[-1] if train.stations else ""),
            date_of_travel=date_of_travel,
            train=TrainSchema.from_domain(train).to_domain(),
        )
        record.add_ticket(ticket)
        if self.user is not record:
            self.user.add_ticket(ticket)
        if not self._save_users():
            record.remove_ticket(ticket.ticket_id)
            self.user.remove_ticket(ticket.ticket_id)
            self._release_seat(train_service, train, row, seat)
            return None
        logger.info("Booked ticket %s for user %s", ticket.ticket_id, record.name)
        return ticket

    def _release_seat(self, train_service: TrainService, train: Train, row: int, seat: int) -> None:
        train.seats[row][seat] = 0
        try:
            train_service.update_train(train)
        except OSError as exc:
            logger.error(
                "Seat %d/%d on train %s is booked without a ticket: %s",
                row,
                seat,
                train.train_id,
                exc,
            )
