"""TagaMidsalip boarding house portal – FastAPI application."""
# Load .env before any app code that might read config
from dotenv import load_dotenv
from pathlib import Path
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.database import Base, engine, SessionLocal
# Import models so Base.metadata has all tables before create_all (schema source of truth)
from app.models import User, BoardingHouse, Room, Occupant, Notification, AuditLog  # noqa: F401
from app.routers import auth, boarding_houses, rooms, admin, notifications, barangays
from app.seed import seed_admin

settings = get_settings()
log = logging.getLogger("uvicorn.error")
app = FastAPI(title=settings.app_name, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(boarding_houses.router)
app.include_router(rooms.router)
app.include_router(admin.router)
app.include_router(notifications.router)
app.include_router(barangays.router)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_admin(db)
    finally:
        db.close()


@app.on_event("startup")
def startup():
    if not settings.mailgun_configured:
        log.info("Mailgun not configured - notifications are stored in-app only")
    try:
        init_db()
    except Exception as e:
        log.warning("Database startup failed (tables/seed skipped). Check DATABASE_URL and network. Error: %s", e)

    if settings.permit_reevaluation_cron_enabled:
        from apscheduler.schedulers.background import BackgroundScheduler
        from app.services.compliance import run_permit_reevaluation_job

        scheduler = BackgroundScheduler()
        scheduler.add_job(run_permit_reevaluation_job, "cron", hour=settings.permit_reevaluation_hour, minute=0)
        scheduler.start()
        app.state.scheduler = scheduler


@app.on_event("shutdown")
def shutdown():
    scheduler = getattr(app.state, "scheduler", None)
    if scheduler is not None:
        scheduler.shutdown(wait=False)


@app.get("/")
def root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy"}
