"""Domain errors for the event repository and service.

NotFound and Full are distinct so the HTTP layer can map them to
different status codes.
"""

from event_finder.core.validation import ValidationError


class EventError(Exception):
    """Base class for event domain errors."""


class EventNotFoundError(EventError):
    """Raised when no event exists with the requested id."""

    def __init__(self, event_id: str) -> None:
        super().__init__(f"Event not found: {event_id}")
        self.event_id = event_id


class EventFullError(EventError):
    """Raised when joining an event that has reached capacity."""

    def __init__(self, event_id: str, max_participants: int) -> None:
        super().__init__(f"Event {event_id} is full ({max_participants} participants)")
        self.event_id = event_id
        self.max_participants = max_participants


class EventValidationError(EventError):
    """Raised when a request payload fails validation.

    Attributes:
        errors: Individual field errors
        message: Headline error for the response body
    """

    def __init__(self, errors: list[ValidationError], message: str | None = None) -> None:
        self.errors = errors
        self.message = message or (errors[0].message if errors else "Invalid request")
        super().__init__(self.message)

    @property
    def details(self) -> list[dict[str, str]]:
        """Field errors as JSON-serializable dicts."""
        return [{"field": e.field, "message": e.message} for e in self.errors]
