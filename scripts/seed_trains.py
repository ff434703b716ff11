#!/usr/bin/env python
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from ticket_booking.core.config import settings
from ticket_booking.models.domain import Train
from ticket_booking.services.train_service import TrainService
from ticket_booking.storage.repository import JsonTrainRepository

DEMO_TRAINS = [
    Train(
        train_id="bacs123",
        train_no="12345",
        seats=[[0] * 4 for _ in range(4)],
        station_times={"bangalore": "13:50:00", "jaipur": "19:50:00", "delhi": "23:50:00"},
        stations=["bangalore", "jaipur", "delhi"],
    ),
    Train(
        train_id="bcrt456",
        train_no="67890",
        seats=[[0] * 4 for _ in range(3)],
        station_times={"bangalore": "08:00:00", "mumbai": "14:30:00", "delhi": "20:00:00"},
        stations=["bangalore", "mumbai", "delhi"],
    ),
]


def main() -> None:
    service = TrainService(repository=JsonTrainRepository(settings.trains_path))
    for train in DEMO_TRAINS:
        service.add_train(train)
    print(f"Seeded {len(DEMO_TRAINS)} trains into {settings.trains_path}")


if __name__ == "__main__":
    main()
