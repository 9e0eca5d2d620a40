"""
Clinic Records API - patients, doctors and employees.
CRUD over three independent person-record tables with per-field validation
and cpf/crm uniqueness.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .models.base import Base, engine
from .models import person  # noqa: F401  registers the person tables
from .api import patients, doctors, employees
from .api.errors import register_error_handlers
from .seed_demo import seed_demo_data

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # NOTE: managed deployments run `alembic upgrade head` instead
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DEMO_DATA:
        seed_demo_data()
    logger.info("%s %s ready", settings.APP_NAME, settings.VERSION)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Records management for patients (pacientes), doctors (medicos) and employees (funcionarios).",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(patients.router, prefix=settings.API_PREFIX)
app.include_router(doctors.router, prefix=settings.API_PREFIX)
app.include_router(employees.router, prefix=settings.API_PREFIX)


@app.get("/health")
def health_check():
    return {"status": "healthy", "service": settings.APP_NAME, "version": settings.VERSION}
