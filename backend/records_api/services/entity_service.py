"""
Generic CRUD service for person records.

One class serves Patient, Doctor and Employee; the differences between them
live in the EntitySchema it is built with. Every rule is checked before the
store is asked to change anything, and the first failing rule is reported.
"""
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from ..core.errors import Conflict, Internal, InvalidArgument, NotFound
from .record_store import RecordNotFound, RecordStore, StoreError
from .schemas import EntitySchema, FieldSpec
from .validators import is_failure, parse_id

logger = logging.getLogger(__name__)


class EntityService:
    def __init__(self, schema: EntitySchema, store: RecordStore):
        self.schema = schema
        self.store = store

    # ── reads ────────────────────────────────────────────────────────────────

    def list_all(self) -> List[Any]:
        try:
            return self.store.find_all()
        except StoreError as exc:
            logger.exception("Listing %s records failed", self.schema.kind)
            raise Internal(f"Could not list {self.schema.kind} records") from exc

    def get_by_id(self, raw_id: Any) -> Any:
        record_id = self._parse_id(raw_id)
        return self._require(record_id)

    # ── writes ───────────────────────────────────────────────────────────────

    def create(self, payload: Optional[Mapping]) -> Any:
        """
        Validate every schema field in order, checking uniqueness as soon as a
        unique field's format is accepted, then insert.
        """
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise InvalidArgument("Request body must be a JSON object")

        data: Dict[str, Any] = {}
        for field in self.schema.fields:
            value = self._validate(field, payload.get(field.name))
            if field.unique:
                self._ensure_unique(field.name, value)
            data[field.name] = value

        try:
            record = self.store.insert(data)
        except StoreError as exc:
            # Two creates racing past the uniqueness pre-check end up here
            logger.exception("Insert of %s failed", self.schema.kind)
            raise Internal(f"Could not create the {self.schema.kind} record") from exc

        logger.info("Created %s %s", self.schema.kind, record.id)
        return record

    def update(self, raw_id: Any, payload: Optional[Mapping]) -> Any:
        """
        Apply a partial update. Supplied fields are checked for format only;
        cpf/crm uniqueness is not re-checked here and is left to the
        database constraint.
        """
        record_id = self._parse_id(raw_id)
        if not payload:
            raise InvalidArgument(
                f"No fields to update. Provide at least one of: {', '.join(self.schema.field_names)}"
            )
        if not isinstance(payload, Mapping):
            raise InvalidArgument("Request body must be a JSON object")

        self._require(record_id)

        changes: Dict[str, Any] = {}
        for field in self.schema.fields:
            if field.name in payload:
                changes[field.name] = self._validate(field, payload[field.name])

        if not changes:
            raise InvalidArgument("No updatable fields were provided")

        try:
            record = self.store.update_partial(record_id, changes)
        except RecordNotFound as exc:
            raise NotFound(self._not_found_message(record_id)) from exc
        except StoreError as exc:
            logger.exception("Update of %s %s failed", self.schema.kind, record_id)
            raise Internal(f"Could not update the {self.schema.kind} record") from exc

        logger.info("Updated %s %s (%s)", self.schema.kind, record_id, ", ".join(sorted(changes)))
        return record

    def delete(self, raw_id: Any) -> None:
        record_id = self._parse_id(raw_id)
        try:
            self.store.delete_by_id(record_id)
        except RecordNotFound as exc:
            raise NotFound(self._not_found_message(record_id)) from exc
        except StoreError as exc:
            logger.exception("Delete of %s %s failed", self.schema.kind, record_id)
            raise Internal(f"Could not delete the {self.schema.kind} record") from exc
        logger.info("Deleted %s %s", self.schema.kind, record_id)

    # ── helpers ──────────────────────────────────────────────────────────────

    def _parse_id(self, raw_id: Any) -> int:
        result = parse_id(raw_id)
        if is_failure(result):
            raise InvalidArgument(result.message, field=result.field)
        return result

    def _validate(self, field: FieldSpec, raw: Any) -> Any:
        result = field.validator(field.name, raw)
        if is_failure(result):
            raise InvalidArgument(result.message, field=result.field)
        return result

    def _ensure_unique(self, field_name: str, value: Any) -> None:
        try:
            existing = self.store.find_by_unique_field(field_name, value)
        except StoreError as exc:
            logger.exception("Uniqueness lookup on %s.%s failed", self.schema.kind, field_name)
            raise Internal(f"Could not verify {field_name} uniqueness") from exc
        if existing is not None:
            logger.info("Rejected %s create: %s already registered", self.schema.kind, field_name)
            raise Conflict(f"{field_name} is already registered", field=field_name)

    def _require(self, record_id: int) -> Any:
        try:
            record = self.store.find_by_id(record_id)
        except StoreError as exc:
            logger.exception("Lookup of %s %s failed", self.schema.kind, record_id)
            raise Internal(f"Could not read the {self.schema.kind} record") from exc
        if record is None:
            raise NotFound(self._not_found_message(record_id))
        return record

    def _not_found_message(self, record_id: int) -> str:
        return f"{self.schema.kind} not found for id {record_id}"
