"""
FastAPI backend exposing CRUD endpoints for companies, employees, managers and workers.
Deployment-ready: CORS, configurable host/port via env.
"""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workforce.core.config import get_settings
from workforce.core.errors import install_error_handlers
from workforce.core.logging import get_logger
from workforce.db.session import create_schema
from workforce.routers import companies, employees, managers, workers

logger = get_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if get_settings().create_schema:
        create_schema()
    yield


app = FastAPI(
    title="Workforce API",
    description="Create/read/update/patch/delete for companies, employees, managers and workers.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", f"X-{settings.application_name}-alert", f"X-{settings.application_name}-params"],
)

install_error_handlers(app)

app.include_router(companies.router)
app.include_router(employees.router)
app.include_router(managers.router)
app.include_router(workers.router)


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    logger.info(f"Starting on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
