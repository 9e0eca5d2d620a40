from ..models.person import Paciente
from ..services.schemas import PATIENT_SCHEMA
from .records import PersonResponse, build_entity_router


class PatientResponse(PersonResponse):
    pass


router = build_entity_router("/pacientes", "patients", PATIENT_SCHEMA, Paciente, PatientResponse)
