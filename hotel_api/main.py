# hotel_api/main.py
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotel_api.config import settings
from hotel_api.exceptions import StorageError
from hotel_api.logging_config import setup_logging
from hotel_api.routes import admin, bookings, rooms
from hotel_api.storage import get_store

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    # Create the data directory and an empty bookings file up front
    try:
        get_store(settings).ensure_initialized()
    except StorageError:
        logger.exception("Error creating data directory")
    logger.info("Alpine Athletics Resort API started")
    yield

app = FastAPI(
    title="Alpine Athletics Resort API",
    description="Booking requests and admin dashboard API for the resort website",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Every error body is {"message": ...}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": "Invalid request body"})

# Registering Routers
app.include_router(admin.router)
app.include_router(bookings.router)
app.include_router(rooms.router)

if settings.STATIC_DIR and os.path.isdir(settings.STATIC_DIR):
    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")

@app.get("/", response_class=PlainTextResponse, tags=["Root"])
def read_root():
    return "Alpine Athletics Resort API is running!"

def run():
    import uvicorn

    uvicorn.run("hotel_api.main:app", host=settings.HOST, port=settings.PORT)
