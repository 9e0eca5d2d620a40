from sqlalchemy import Column, Integer, String, Date
from .base import Base, TimestampMixin


class PersonMixin(TimestampMixin):
    """Columns shared by every person record."""
    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(200), nullable=False)
    idade = Column(Integer, nullable=False)
    cpf = Column(String(14), unique=True, nullable=False, index=True)  # ###.###.###-##
    dob = Column(Date, nullable=False)


class Paciente(Base, PersonMixin):
    __tablename__ = "pacientes"


class Funcionario(Base, PersonMixin):
    __tablename__ = "funcionarios"


class Medico(Base, PersonMixin):
    __tablename__ = "medicos"

    crm = Column(String(20), unique=True, nullable=False, index=True)
