import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rayzum.config import settings
from rayzum.core.errors import RayzumError
from rayzum.database import init_db
from rayzum.dependencies import STORAGE_BACKENDS, get_store
from rayzum.logging_config import setup_logging
from rayzum.routers import contacts, education, experience, resumes, stats
from rayzum.store import EntityStore

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Rayzum API",
    description="Contact details, experience templates, education and resumes composed from them.",
    version="1.0.0",
)

cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(contacts.names)
app.include_router(contacts.phones)
app.include_router(contacts.emails)
app.include_router(experience.router)
app.include_router(education.router)
app.include_router(resumes.router)
app.include_router(stats.router)


@app.exception_handler(RayzumError)
async def domain_error_handler(request, exc: RayzumError):
    logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready(store: EntityStore = Depends(get_store)):
    try:
        store.ping()
        return {"status": "ready"}
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})


@app.on_event("startup")
def on_startup():
    logger.info("Starting Rayzum API (storage=%s)", settings.storage_backend)
    backend = (settings.storage_backend or "").lower()
    if backend not in STORAGE_BACKENDS:
        raise RuntimeError(f"Unknown STORAGE_BACKEND {settings.storage_backend!r}; use one of {sorted(STORAGE_BACKENDS)}")
    env = (settings.app_env or "development").lower()
    if env in {"production", "prod"}:
        if settings.secret_key == "replace-with-a-long-random-secret-key":
            raise RuntimeError("SECRET_KEY placeholder is not allowed in production")
        if "username:password@" in settings.database_url:
            raise RuntimeError("DATABASE_URL placeholder credentials are not allowed in production")
    else:
        if settings.secret_key == "replace-with-a-long-random-secret-key":
            logger.warning("SECRET_KEY is using placeholder default. Set SECRET_KEY in .env for secure deployments.")
    if backend == "sql":
        init_db()


@app.get("/")
def root():
    return {"message": "Rayzum API. Build resumes from your saved names, phones, emails, experience and education."}
