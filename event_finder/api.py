"""Event Finder API - FastAPI service.

HTTP surface over EventService. Domain errors are mapped to status codes
by exception handlers so the route functions stay thin:
- EventNotFoundError -> 404
- EventFullError -> 400
- EventValidationError / malformed request -> 400
"""

import logging
from typing import Any

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from event_finder.core.config import Config
from event_finder.core.errors import EventFullError, EventNotFoundError, EventValidationError
from event_finder.core.event import event_to_dict
from event_finder.core.seed import SAMPLE_EVENTS
from event_finder.core.validation import REQUIRED_FIELDS
from event_finder.service import EventService
from event_finder.shell.config_loader import load_config, load_seed_events


logger = logging.getLogger(__name__)


# ===== Request Models =====

class EventCreate(BaseModel):
    """Body of POST /api/events. Required fields are checked by the service."""
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    location: str | None = None
    date: str | None = None
    max_participants: int | None = Field(default=None, alias="maxParticipants")
    latitude: float | None = None
    longitude: float | None = None
    category: str | None = None


class EventUpdate(BaseModel):
    """Body of PUT /api/events/{id}. Only supplied fields are applied."""
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    location: str | None = None
    date: str | None = None
    max_participants: int | None = Field(default=None, alias="maxParticipants")
    current_participants: int | None = Field(default=None, alias="currentParticipants")
    latitude: float | None = None
    longitude: float | None = None
    category: str | None = None


# ===== Routes =====

router = APIRouter(prefix="/api/events", tags=["events"])


def _service(request: Request) -> EventService:
    return request.app.state.service


@router.post("", status_code=201)
async def create_event(body: EventCreate, request: Request):
    """Create a new event."""
    event = _service(request).create_event(body.model_dump(by_alias=True, exclude_unset=True))
    return {"message": "Event created successfully", "event": event_to_dict(event)}


@router.get("")
async def list_events(
    request: Request,
    location: str | None = Query(default=None),
    category: str | None = Query(default=None),
    date: str | None = Query(default=None),
    latitude: str | None = Query(default=None),
    longitude: str | None = Query(default=None),
    radius: str | None = Query(default=None),
):
    """List events, optionally filtered by location, category, date, or distance."""
    matches = _service(request).list_events(
        location=location,
        category=category,
        date=date,
        latitude=latitude,
        longitude=longitude,
        radius=radius,
    )
    return {
        "count": len(matches),
        "events": [event_to_dict(m.event, m.distance_km) for m in matches],
    }


@router.get("/{event_id}")
async def get_event(event_id: str, request: Request):
    """Get a single event by ID."""
    return {"event": event_to_dict(_service(request).get_event(event_id))}


@router.put("/{event_id}")
async def update_event(event_id: str, body: EventUpdate, request: Request):
    """Update fields of an existing event."""
    event = _service(request).update_event(
        event_id,
        body.model_dump(by_alias=True, exclude_unset=True),
    )
    return {"message": "Event updated successfully", "event": event_to_dict(event)}


@router.delete("/{event_id}")
async def delete_event(event_id: str, request: Request):
    """Delete an event."""
    _service(request).delete_event(event_id)
    return {"message": "Event deleted successfully"}


@router.post("/{event_id}/join")
async def join_event(event_id: str, request: Request):
    """Join an event."""
    event = _service(request).join_event(event_id)
    return {"message": "Successfully joined event", "event": event_to_dict(event)}


@router.post("/{event_id}/leave")
async def leave_event(event_id: str, request: Request):
    """Leave an event."""
    event = _service(request).leave_event(event_id)
    return {"message": "Successfully left event", "event": event_to_dict(event)}


# ===== Exception Handlers =====

async def _not_found_handler(request: Request, exc: EventNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "Event not found"})


async def _full_handler(request: Request, exc: EventFullError) -> JSONResponse:
    logger.info("Join rejected, event %s is full", exc.event_id)
    return JSONResponse(
        status_code=400,
        content={
            "error": "Event is full",
            "message": "This event has reached maximum participants",
        },
    )


async def _validation_handler(request: Request, exc: EventValidationError) -> JSONResponse:
    content: dict[str, Any] = {"error": exc.message, "details": exc.details}
    if any(e.code == "missing" for e in exc.errors):
        content["required"] = list(REQUIRED_FIELDS)
    return JSONResponse(status_code=400, content=content)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": details})


async def _http_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Route not found",
                "path": request.url.path,
                "method": request.method,
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def _unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": "Something went wrong"},
    )


# ===== Application =====

def build_service(config: Config) -> EventService:
    """Create a service seeded according to config."""
    service = EventService()

    if config.seed_sample_events:
        service.seed(SAMPLE_EVENTS)

    if config.seed_events_path:
        try:
            service.seed(load_seed_events(config.seed_events_path))
        except FileNotFoundError:
            logger.warning("Seed events file not found: %s", config.seed_events_path)

    return service


def create_app(service: EventService | None = None, config: Config | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        service: Event service (built from config if not provided)
        config: Application configuration (loaded from file if not provided)

    Returns:
        Configured FastAPI app
    """
    config = config or load_config()

    app = FastAPI(
        title=config.title,
        description="Discover, create, and join events near you",
        version=config.version,
    )
    app.state.service = service if service is not None else build_service(config)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info("%s %s -> %d", request.method, request.url.path, response.status_code)
        return response

    app.add_exception_handler(EventNotFoundError, _not_found_handler)
    app.add_exception_handler(EventFullError, _full_handler)
    app.add_exception_handler(EventValidationError, _validation_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_handler)
    app.add_exception_handler(Exception, _unhandled_handler)

    @app.get("/")
    async def root():
        """Service info and endpoint list."""
        return {
            "message": f"{config.title} is running",
            "version": config.version,
            "endpoints": {
                "health": "GET /health",
                "createEvent": "POST /api/events",
                "getAllEvents": "GET /api/events",
                "getEventById": "GET /api/events/:id",
                "updateEvent": "PUT /api/events/:id",
                "deleteEvent": "DELETE /api/events/:id",
                "joinEvent": "POST /api/events/:id/join",
                "leaveEvent": "POST /api/events/:id/leave",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "events": len(app.state.service.store)}

    app.include_router(router)

    return app
