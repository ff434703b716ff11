import logging
from typing import List, Optional, Sequence

from ticket_booking.models.domain import Train
from ticket_booking.storage.repository import JsonTrainRepository

logger = logging.getLogger(__name__)


def search_trains(trains: Sequence[Train], source: str, destination: str) -> List[Train]:
    return [train for train in trains if train.serves(source, destination)]


class TrainService:
    def __init__(self, repository: JsonTrainRepository):
        self.repository = repository
        self.trains: List[Train] = repository.load_all()

    def search_trains(self, source: str, destination: str) -> List[Train]:
        matches = search_trains(self.trains, source, destination)
        logger.info(
            "Found %d trains from %s to %s", len(matches), source, destination
        )
        return matches

    def get_train(self, train_id: str) -> Optional[Train]:
        for train in self.trains:
            if train.train_id == train_id:
                return train
        return None

    def add_train(self, train: Train) -> None:
        for idx, existing in enumerate(self.trains):
            if existing.train_id == train.train_id:
                self.trains[idx] = train
                break
        else:
            self.trains.append(train)
        self.repository.save_all(self.trains)

    def update_train(self, train: Train) -> None:
        self.add_train(train)

    def book_seat(self, train: Train, row: int, seat: int) -> bool:
        if not train.is_seat_available(row, seat):
            return False
        train.seats[row][seat] = 1
        try:
            self.update_train(train)
        except OSError:
            train.seats[row][seat] = 0
            raise
        logger.info("Booked seat %d/%d on train %s", row, seat, train.train_id)
        return True
