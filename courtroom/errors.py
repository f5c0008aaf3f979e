"""
Courtroom error types.

Kept in their own module so the API layer can map them to HTTP responses
without importing the engine.
"""


class CourtroomError(Exception):
    """Base class for rejected courtroom operations. Session state is left unchanged."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": type(self).__name__, "detail": self.message}


class InvalidTurn(CourtroomError):
    """Raised when a submitted turn has no text and no attachments."""

    status_code = 422


class InvalidTransition(CourtroomError):
    """Raised when an operation is not allowed in the session's current state."""

    status_code = 409


class SessionNotFound(CourtroomError):
    """Raised when a session id is unknown."""

    status_code = 404
