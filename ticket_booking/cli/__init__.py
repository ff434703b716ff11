from typing import Optional

from ticket_booking.core.config import Settings, settings as default_settings
from ticket_booking.models.domain import User
from ticket_booking.services.user_booking_service import UserBookingService
from ticket_booking.storage.repository import JsonTrainRepository, JsonUserRepository


def get_booking_service(
    user: Optional[User] = None, settings: Optional[Settings] = None
) -> UserBookingService:
    settings = settings or default_settings
    return UserBookingService(
        user_repository=JsonUserRepository(settings.users_path),
        train_repository=JsonTrainRepository(settings.trains_path),
        user=user,
        settings=settings,
    )
