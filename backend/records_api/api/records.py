"""
Router factory shared by the patient, doctor and employee endpoints.

Path ids are taken as raw strings so the service's identifier parser decides
what is valid, and bodies as raw JSON so type checks (e.g. idade must be a
number, not "30") happen in the validators rather than in request parsing.
"""
from datetime import date, datetime
from typing import Any, List, Type

from fastapi import APIRouter, Body, Depends, Response, status
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from ..models.base import get_db
from ..services.entity_service import EntityService
from ..services.record_store import SqlAlchemyRecordStore
from ..services.schemas import EntitySchema


class PersonResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    idade: int
    cpf: str
    dob: date
    created_at: datetime
    updated_at: datetime


def build_entity_router(
    prefix: str,
    tag: str,
    schema: EntitySchema,
    model,
    response_model: Type[BaseModel] = PersonResponse,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])

    def get_service(db: Session = Depends(get_db)) -> EntityService:
        return EntityService(schema, SqlAlchemyRecordStore(db, model))

    @router.get("", response_model=List[response_model])
    def list_records(service: EntityService = Depends(get_service)):
        return service.list_all()

    @router.get("/{record_id}", response_model=response_model)
    def get_record(record_id: str, service: EntityService = Depends(get_service)):
        return service.get_by_id(record_id)

    @router.post("", response_model=response_model, status_code=status.HTTP_201_CREATED)
    def create_record(payload: Any = Body(default=None), service: EntityService = Depends(get_service)):
        return service.create(payload)

    @router.put("/{record_id}", response_model=response_model)
    @router.patch("/{record_id}", response_model=response_model)
    def update_record(
        record_id: str,
        payload: Any = Body(default=None),
        service: EntityService = Depends(get_service),
    ):
        """Partial update: fields left out of the body are untouched."""
        return service.update(record_id, payload)

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    def delete_record(record_id: str, service: EntityService = Depends(get_service)):
        service.delete(record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
