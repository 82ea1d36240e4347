# status_api/core/exceptions.py


class AppError(Exception):
    def __init__(
        self,
        message: str,
        *,
        status_code: int = 400,
        errors: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = list(errors) if errors is not None else None


class BadRequestError(AppError):
    def __init__(self, message: str = "Bad request", errors: list[str] | None = None) -> None:
        super().__init__(message, status_code=400, errors=errors)


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Unauthorized", errors: list[str] | None = None) -> None:
        super().__init__(message, status_code=401, errors=errors)


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden", errors: list[str] | None = None) -> None:
        super().__init__(message, status_code=403, errors=errors)


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found", errors: list[str] | None = None) -> None:
        super().__init__(message, status_code=404, errors=errors)


class ConflictError(AppError):
    def __init__(self, message: str = "Conflict", errors: list[str] | None = None) -> None:
        super().__init__(message, status_code=409, errors=errors)


class UnsupportedMediaTypeError(AppError):
    def __init__(self, message: str = "Unsupported media type", errors: list[str] | None = None) -> None:
        super().__init__(message, status_code=415, errors=errors)


class ValidationFailedError(AppError):
    def __init__(self, errors: list[str], message: str = "Validation failed") -> None:
        super().__init__(message, status_code=422, errors=errors)


class RateLimitedError(AppError):
    def __init__(self, message: str = "Rate limit exceeded!", *, retry_after: int | None = None) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after
