# This file loads env variables and must thus be imported before anything else.
from . import env_loader  # noqa: F401

import os
import logging

from fastapi import FastAPI, Depends, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from ironledger.agg import WorkoutStats
from ironledger.session import SessionStore
from .dependencies import session_store
from .routers import (
    session_router,
    rest_timer_router,
    rotation_router,
    templates_router,
    history_router,
    records_router,
)

"""FastAPI application for the local IronLedger client.

Exposes the session commands (start, edit, toggle, complete, discard), the
rest timer, the rotation pointer, templates, history and personal records.
This module configures CORS and logging behavior.
"""

logger = logging.getLogger(__name__)

app = FastAPI()
app.include_router(session_router)
app.include_router(rest_timer_router)
app.include_router(rotation_router)
app.include_router(templates_router)
app.include_router(history_router)
app.include_router(records_router)
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=[
        "http://localhost:5173",  # Vite dev server
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Configure basic logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(filename)s:%(lineno)d",
    datefmt="%Y-%m-%d %H:%M:%S",
)
# Configure the logging for the app itself if the user specifies it.
if "LOG_LEVEL" in os.environ:
    match os.environ["LOG_LEVEL"].upper():
        case "DEBUG":
            log_level = logging.DEBUG
        case "INFO":
            log_level = logging.INFO
        case "WARNING":
            log_level = logging.WARNING
        case "ERROR":
            log_level = logging.ERROR
        case "CRITICAL":
            log_level = logging.CRITICAL
        case _:
            raise ValueError(f"Invalid log level: {os.environ['LOG_LEVEL']}")
    logging.getLogger("ironledger").setLevel(log_level)


@app.get("/stats", response_model=WorkoutStats)
def get_stats(store: SessionStore = Depends(session_store)) -> WorkoutStats:
    """Totals across completed history: workouts, this week, records, volume."""
    return store.stats()


@app.post("/reset", response_model=dict[str, str])
def reset_all_data(store: SessionStore = Depends(session_store)) -> dict[str, str]:
    """Delete all history and records and restore the default templates.

    Any session in progress is dropped.
    """
    if not store.reset_all_data():
        raise HTTPException(status_code=503, detail="Data reset but could not be saved")
    return {"message": "All data reset"}


@app.post("/save", response_model=dict[str, str])
def save_state(store: SessionStore = Depends(session_store)) -> dict[str, str]:
    """Retry writing the current state, e.g. after a failed save."""
    if not store.save():
        raise HTTPException(status_code=503, detail="State could not be saved")
    return {"message": "State saved"}


@app.get("/health")
@app.options("/health")
def health_check(response: Response) -> dict[str, str]:
    """Health check endpoint that returns 200 status with CORS from anywhere."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "*"
    return {"status": "healthy"}
