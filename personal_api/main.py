# personal_api/main.py
import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from personal_api.config import Settings, settings
from personal_api.deps import get_settings
from personal_api.logging_config import setup_logging

# Routers
from personal_api.routers.contact import router as contact_router
from personal_api.routers.health import router as health_router
from personal_api.routers.resume import router as resume_router

log = logging.getLogger("personal_api")
access_log = logging.getLogger("personal_api.requests")


def create_app(cfg: Settings = settings) -> FastAPI:

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(cfg.LOG_DIR, cfg.LOG_LEVEL)
        log.info("🚀 Starting personal API (env=%s) on http://%s:%s", cfg.ENV, cfg.HOST, cfg.PORT)
        missing = cfg.missing_email_settings()
        if missing:
            # contact submissions are still acknowledged, just not emailed
            log.warning("⚠️ Email notifications disabled, missing: %s", ", ".join(missing))
        yield
        log.info("👋 Shutdown complete")

    app = FastAPI(title="Personal API", version="0.1.0", lifespan=lifespan)
    # handlers see the same Settings the app was built with
    app.dependency_overrides[get_settings] = lambda: cfg

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["content-type"],
    )

    # ---------- Request log ----------
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - started) * 1000
            access_log.error("%s %s -> unhandled error (%.1fms)", request.method, request.url.path, elapsed)
            raise
        elapsed = (time.perf_counter() - started) * 1000
        access_log.info("%s %s -> %s (%.1fms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    # ---------- Last-resort error body ----------
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    # ---------- Routers ----------
    app.include_router(health_router)
    app.include_router(resume_router)
    app.include_router(contact_router)

    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "personal_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,  # setup_logging() owns the config
    )


if __name__ == "__main__":
    run()
