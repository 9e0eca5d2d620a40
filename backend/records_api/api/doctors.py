from ..models.person import Medico
from ..services.schemas import DOCTOR_SCHEMA
from .records import PersonResponse, build_entity_router


class DoctorResponse(PersonResponse):
    crm: str


router = build_entity_router("/medicos", "doctors", DOCTOR_SCHEMA, Medico, DoctorResponse)
