import logging
import sys

from ticket_booking.cli.shell import BookingShell
from ticket_booking.core.config import settings
from ticket_booking.core.exceptions import CorruptStoreError
from ticket_booking.core.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    configure_logging(settings.log_level)
    try:
        shell = BookingShell(settings=settings)
    except CorruptStoreError as exc:
        logger.error("Fatal: %s", exc.message)
        return 1
    try:
        shell.run()
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
