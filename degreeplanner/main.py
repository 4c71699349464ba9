from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from degreeplanner.api.routes import router as api_router
from degreeplanner.core.config import settings
from degreeplanner.core.database import engine
from degreeplanner.core.logging import get_logger, setup_logging
from degreeplanner.models.base import Base
import degreeplanner.models  # noqa: F401

logger = get_logger("main")

app = FastAPI(title="Degree Planner API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.on_event("startup")
def on_startup():
    setup_logging(level=settings.log_level, log_dir=settings.log_dir)
    Base.metadata.create_all(bind=engine)
    logger.info("Degree Planner API started (environment=%s)", settings.environment)


@app.get("/health")
def health_check():
    return {"status": "ok"}
