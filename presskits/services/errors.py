"""Error taxonomy for lifecycle operations.

Routes let ``PressKitError`` subclasses propagate; the app-level handler turns
them into ``{"error": ..., "kind": ...}`` responses. ``CollaboratorError`` is
raised by the outbound HTTP clients and is only ever caught and logged by the
background jobs.
"""


class PressKitError(Exception):
    kind = "error"
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message, "kind": self.kind}


class NotFoundError(PressKitError):
    kind = "not_found"
    status_code = 404


class InvalidTransitionError(PressKitError):
    kind = "invalid_transition"
    status_code = 409

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class ValidationError(PressKitError):
    kind = "validation"
    status_code = 400


class CollaboratorError(Exception):
    """An outbound call to the run registry, workflow engine or email service failed."""

    def __init__(self, service, message, status_code=None):
        super().__init__(f"{service}: {message}")
        self.service = service
        self.status_code = status_code
