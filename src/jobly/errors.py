"""Error taxonomy shared by repositories, auth and the web layer."""


class JoblyError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str | list[str] = "", status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInputError(JoblyError):
    status_code = 400

    def __init__(self, message: str | list[str] = "Bad Request"):
        super().__init__(message)


class NotFoundError(JoblyError):
    status_code = 404

    def __init__(self, message: str | list[str] = "Not Found"):
        super().__init__(message)


class ConflictError(JoblyError):
    status_code = 409

    def __init__(self, message: str | list[str] = "Conflict"):
        super().__init__(message)


class UnauthorizedError(JoblyError):
    status_code = 401

    def __init__(self, message: str | list[str] = "Unauthorized"):
        super().__init__(message)
