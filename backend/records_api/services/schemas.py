"""
Declarative descriptions of the three person-record kinds.

Field order is significant: create and update walk the fields in this order
and stop at the first failure, so the first violated rule is always the one
reported.
"""
from dataclasses import dataclass
from typing import Any, Callable, Tuple

from . import validators


@dataclass(frozen=True)
class FieldSpec:
    name: str
    validator: Callable[[str, Any], Any]
    unique: bool = False


@dataclass(frozen=True)
class EntitySchema:
    kind: str
    fields: Tuple[FieldSpec, ...]

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def unique_fields(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.unique)


NOME = FieldSpec("nome", validators.validate_name)
IDADE = FieldSpec("idade", validators.validate_age)
CPF = FieldSpec("cpf", validators.validate_cpf, unique=True)
CRM = FieldSpec("crm", validators.validate_crm, unique=True)
DOB = FieldSpec("dob", validators.validate_date)

PATIENT_SCHEMA = EntitySchema(kind="Patient", fields=(NOME, IDADE, CPF, DOB))
EMPLOYEE_SCHEMA = EntitySchema(kind="Employee", fields=(NOME, IDADE, CPF, DOB))
# cpf is checked (format, then uniqueness) before any crm check
DOCTOR_SCHEMA = EntitySchema(kind="Doctor", fields=(NOME, IDADE, CPF, CRM, DOB))
