from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Generic, List, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ticket_booking.core.exceptions import CorruptStoreError
from ticket_booking.models.schemas import TrainSchema, UserSchema

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", TrainSchema, UserSchema)


class JsonRepository(Generic[SchemaT]):
    """
    Whole-collection JSON store: every load reads the full file and every
    save rewrites it. There is no locking between processes.
    """

    schema: Type[SchemaT]

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._adapter = TypeAdapter(List[self.schema])

    def load_all(self) -> list:
        if not self.path.exists():
            logger.info("Store %s does not exist, starting empty", self.path)
            return []
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise CorruptStoreError(str(self.path), str(exc)) from exc
        if not raw.strip():
            return []
        try:
            records = self._adapter.validate_json(raw)
        except ValidationError as exc:
            raise CorruptStoreError(str(self.path), str(exc)) from exc
        items = [record.to_domain() for record in records]
        logger.debug("Loaded %d records from %s", len(items), self.path)
        return items

    def save_all(self, items: list) -> None:
        payload = [
            self.schema.from_domain(item).model_dump(by_alias=True) for item in items
        ]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.debug("Saved %d records to %s", len(items), self.path)


class JsonUserRepository(JsonRepository[UserSchema]):
    schema = UserSchema


class JsonTrainRepository(JsonRepository[TrainSchema]):
    schema = TrainSchema
