# contact_api/main.py
import logging

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from sqlalchemy import text

from contact_api.core.config import settings
from contact_api.core.deps import get_db
from contact_api.core.logging_config import configure_logging
from contact_api.db.session import engine
from contact_api.db.mixins import Base
# load DB models so Base.metadata is populated
import contact_api.db.models  # noqa: F401

# Routers
from contact_api.api.contact import router as contact_router
from contact_api.web.routes import router as ui_router

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

@app.on_event("startup")
def on_startup():
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        logger.info("create_all done. Tables: %s", list(Base.metadata.tables.keys()))

# Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(contact_router)
app.include_router(ui_router)

@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}

@app.get("/health/db")
def db_ping(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {"db": "ok"}
