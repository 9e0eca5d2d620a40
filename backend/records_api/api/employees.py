from ..models.person import Funcionario
from ..services.schemas import EMPLOYEE_SCHEMA
from .records import PersonResponse, build_entity_router


class EmployeeResponse(PersonResponse):
    pass


router = build_entity_router("/funcionarios", "employees", EMPLOYEE_SCHEMA, Funcionario, EmployeeResponse)
