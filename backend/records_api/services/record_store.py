"""
Storage collaborator for person records.

The service layer only talks to the RecordStore protocol. SqlAlchemyRecordStore
binds it to one ORM model and one session; the database's unique constraints
are the final word on cpf/crm uniqueness.
"""
from typing import Any, Dict, List, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .validators import MAX_INT


class StoreError(Exception):
    """The backing store failed to complete an operation."""


class RecordNotFound(StoreError):
    """update_partial/delete_by_id targeted an id with no row."""


class RecordStore(Protocol):
    def find_all(self) -> List[Any]: ...

    def find_by_id(self, record_id: int) -> Optional[Any]: ...

    def find_by_unique_field(self, field_name: str, value: Any) -> Optional[Any]: ...

    def insert(self, data: Dict[str, Any]) -> Any: ...

    def update_partial(self, record_id: int, changes: Dict[str, Any]) -> Any: ...

    def delete_by_id(self, record_id: int) -> None: ...


class SqlAlchemyRecordStore:
    """RecordStore over a single mapped table."""

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    def find_all(self) -> List[Any]:
        try:
            return self.db.query(self.model).order_by(self.model.id).all()
        except (SQLAlchemyError, OverflowError) as exc:
            raise StoreError(f"Could not list {self.model.__tablename__}") from exc

    def find_by_id(self, record_id: int) -> Optional[Any]:
        # No row can carry an id the INTEGER column cannot represent
        if record_id > MAX_INT:
            return None
        try:
            return self.db.query(self.model).filter(self.model.id == record_id).first()
        except (SQLAlchemyError, OverflowError) as exc:
            raise StoreError(f"Could not read {self.model.__tablename__} {record_id}") from exc

    def find_by_unique_field(self, field_name: str, value: Any) -> Optional[Any]:
        column = getattr(self.model, field_name)
        try:
            return self.db.query(self.model).filter(column == value).first()
        except (SQLAlchemyError, OverflowError) as exc:
            raise StoreError(f"Could not look up {self.model.__tablename__} by {field_name}") from exc

    def insert(self, data: Dict[str, Any]) -> Any:
        record = self.model(**data)
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except (SQLAlchemyError, OverflowError) as exc:
            self.db.rollback()
            raise StoreError(f"Could not insert into {self.model.__tablename__}") from exc
        return record

    def update_partial(self, record_id: int, changes: Dict[str, Any]) -> Any:
        record = self.find_by_id(record_id)
        if record is None:
            raise RecordNotFound(f"{self.model.__tablename__} {record_id} does not exist")
        for name, value in changes.items():
            setattr(record, name, value)
        try:
            self.db.commit()
            self.db.refresh(record)
        except (SQLAlchemyError, OverflowError) as exc:
            self.db.rollback()
            raise StoreError(f"Could not update {self.model.__tablename__} {record_id}") from exc
        return record

    def delete_by_id(self, record_id: int) -> None:
        record = self.find_by_id(record_id)
        if record is None:
            raise RecordNotFound(f"{self.model.__tablename__} {record_id} does not exist")
        try:
            self.db.delete(record)
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            self.db.rollback()
            raise StoreError(f"Could not delete {self.model.__tablename__} {record_id}") from exc
