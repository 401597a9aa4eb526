from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api.api.error_handlers import register_error_handlers
from employee_api.api.router import api_router
from employee_api.core.config import Settings, settings
from employee_api.core.logging_config import setup_logging
from employee_api.models.employee import Employee
from employee_api.services.employee_service import EmployeeService
from employee_api.services.repository import EmployeeRepository, InMemoryStore

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = (
    ("John", "Doe"),
    ("Jane", "Doe"),
)


def seed_sample_data(repository: EmployeeRepository) -> None:
    for first_name, last_name in SAMPLE_EMPLOYEES:
        repository.create(Employee(first_name=first_name, last_name=last_name))
    logger.info("Seeded %d sample employees", len(SAMPLE_EMPLOYEES))


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    setup_logging(app_settings.LOG_LEVEL)

    store = InMemoryStore()
    repository = EmployeeRepository(store)

    @asynccontextmanager
    async def lifespan(application: FastAPI) -> AsyncIterator[None]:
        if app_settings.SEED_SAMPLE_DATA and not store:
            seed_sample_data(repository)
        yield

    application = FastAPI(
        title="Employee API",
        description="CRUD over employees and their benefits",
        version=app_settings.APP_VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    application.state.employee_service = EmployeeService(repository)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)
    application.include_router(api_router)

    @application.get("/")
    async def root():
        return {"message": "Employee API"}

    return application


app = create_app()
