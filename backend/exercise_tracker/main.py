# exercise_tracker/main.py
import os
import time
import logging
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from exercise_tracker.errors import TrackerError
from exercise_tracker.routers.users import router as users_router
from exercise_tracker.routers.exercises import router as exercises_router
from exercise_tracker.db import SessionLocal, init_db  # for healthz DB check
from exercise_tracker.settings import get_settings

log = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Local runs get tables without alembic; elsewhere migrations own the schema
    if get_settings().ENV == "local":
        init_db()
    yield


app = FastAPI(
    title="Exercise Tracker API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "users", "description": "User registration & listing"},
        {"name": "exercises", "description": "Exercise logging & history"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "server error"})

@app.get("/")
def root():
    return {"ok": True, "name": "Exercise Tracker API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": os.getenv("API_VERSION", "dev")}

# Routers
app.include_router(users_router)
app.include_router(exercises_router)
