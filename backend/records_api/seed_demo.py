"""
Demo data seeder.

Creates one patient, one doctor and one employee so a fresh instance has
something to list. Records go through EntityService, so they obey the same
validation as API input.

This seeder is idempotent: a record whose cpf is already stored is skipped.
"""
import logging

from .models.base import SessionLocal, Base, engine
from .models.person import Paciente, Medico, Funcionario
from .services.entity_service import EntityService
from .services.record_store import SqlAlchemyRecordStore
from .services.schemas import PATIENT_SCHEMA, DOCTOR_SCHEMA, EMPLOYEE_SCHEMA

logger = logging.getLogger(__name__)

DEMO_PATIENT = {"nome": "Ana Demo", "idade": 30, "cpf": "900.000.000-01", "dob": "1994-01-10"}
DEMO_DOCTOR = {"nome": "Bruno Demo", "idade": 45, "cpf": "900.000.000-02", "crm": "900001", "dob": "1979-06-15"}
DEMO_EMPLOYEE = {"nome": "Carla Demo", "idade": 28, "cpf": "900.000.000-03", "dob": "1996-11-02"}

DEMO_RECORDS = (
    (PATIENT_SCHEMA, Paciente, DEMO_PATIENT),
    (DOCTOR_SCHEMA, Medico, DEMO_DOCTOR),
    (EMPLOYEE_SCHEMA, Funcionario, DEMO_EMPLOYEE),
)


def seed_demo_data() -> None:
    """Create the demo records that do not exist yet."""
    # Ensure tables exist (no-op when already created on startup)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        for schema, model, payload in DEMO_RECORDS:
            store = SqlAlchemyRecordStore(db, model)
            if store.find_by_unique_field("cpf", payload["cpf"]) is not None:
                continue
            record = EntityService(schema, store).create(payload)
            logger.info("[seed] Created demo %s: %s (id: %s)", schema.kind, record.nome, record.id)
    finally:
        db.close()
