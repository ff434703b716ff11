from pathlib import Path

import pytest

from ticket_booking.core.config import Settings
from ticket_booking.core.security import hash_password
from ticket_booking.models.domain import Train, User
from ticket_booking.storage.repository import JsonTrainRepository, JsonUserRepository


def make_train(train_id: str = "T001", stations=None) -> Train:
    stations = stations or ["bangalore", "mumbai", "delhi"]
    return Train(
        train_id=train_id,
        train_no="12345",
        seats=[[0, 0, 1, 0], [1, 0, 0, 0]],
        station_times={"bangalore": "08:00:00", "mumbai": "14:30:00", "delhi": "20:00:00"},
        stations=stations,
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        users_path=str(tmp_path / "users.json"),
        trains_path=str(tmp_path / "trains.json"),
    )


@pytest.fixture
def user_repository(settings: Settings) -> JsonUserRepository:
    return JsonUserRepository(settings.users_path)


@pytest.fixture
def train_repository(settings: Settings) -> JsonTrainRepository:
    repository = JsonTrainRepository(settings.trains_path)
    repository.save_all([make_train()])
    return repository


@pytest.fixture
def stored_user(user_repository: JsonUserRepository) -> User:
    user = User(name="john_doe", hashed_password=hash_password("plainPW"), user_id="USER123")
    user_repository.save_all([user])
    return user
