import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from turnopro.core.config import settings
from turnopro.api.v1.payroll import router as payroll_router
from turnopro.api.v1.calendar import router as calendar_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="TurnoPro API",
    description="Turnos, recargos y nómina",
    version="1.0.0",
    # Swagger UI nur in Entwicklung – in Produktion DEBUG=false setzen
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/v1"

app.include_router(payroll_router, prefix=API_PREFIX)
app.include_router(calendar_router, prefix=API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "TurnoPro API", "version": "1.0.0"}
