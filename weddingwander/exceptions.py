class AppError(Exception):
    """Base for errors the API reports as ``{"error": code, "message": ...}``."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class NotFoundError(AppError):
    code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} '{resource_id}' not found")
        self.resource = resource
        self.resource_id = resource_id


class ValidationError(AppError):
    code = "VALIDATION_ERROR"


class ConflictError(AppError):
    code = "CONFLICT"


class UnauthorizedError(AppError):
    code = "UNAUTHORIZED"


class AlreadyRegisteredError(ConflictError):
    code = "ALREADY_REGISTERED"

    def __init__(self, wedding_id: str):
        super().__init__(f"Already registered for wedding '{wedding_id}'")
        self.wedding_id = wedding_id


class CapacityExceededError(ConflictError):
    code = "CAPACITY_EXCEEDED"

    def __init__(self, wedding_id: str, requested: int, remaining: int):
        super().__init__(
            f"Wedding '{wedding_id}' has {remaining} spot(s) left, {requested} requested"
        )
        self.wedding_id = wedding_id
        self.requested = requested
        self.remaining = remaining


class RegistrationAlreadyCanceledError(ConflictError):
    code = "ALREADY_CANCELED"

    def __init__(self, registration_id: str):
        super().__init__(f"Registration '{registration_id}' is already canceled")
        self.registration_id = registration_id


class AlreadyExistsError(ConflictError):
    code = "ALREADY_EXISTS"

    def __init__(self, email: str):
        super().__init__(f"Account '{email}' already exists")


class InvalidCredentialsError(UnauthorizedError):
    code = "INVALID_CREDENTIALS"

    def __init__(self):
        super().__init__("Invalid email or password")
