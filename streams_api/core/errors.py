import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Базовая ошибка API с кодом для клиента"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "INTERNAL_SERVER_ERROR"
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "VALIDATION_ERROR"
    default_message = "Invalid request"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"
    default_message = "Resource not found"


class InternalServerError(AppError):
    pass


class RepositoryError(Exception):
    """Ошибка выполнения запроса к хранилищу"""


class DatabaseConnectionError(Exception):
    """Не удалось подключиться к базе данных"""


def error_response(status_code: int, error_code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error_code, "message": message},
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """Человекочитаемое описание первой ошибки валидации"""
    errors = exc.errors()
    if not errors:
        return "Invalid request body"

    error = errors[0]
    loc = error.get("loc") or ()
    kind = error.get("type", "")
    field = loc[-1] if len(loc) > 1 and isinstance(loc[-1], str) else None

    # Невалидный JSON или тело не является объектом
    if kind == "json_invalid" or field is None:
        return "Invalid request body"
    # Поля пути приходят в snake_case, в API они camelCase
    if "_" in field:
        field = to_camel(field)
    if kind.startswith("uuid"):
        return f"Invalid {field} format"
    if kind == "missing":
        return f"{field} is required"
    return f"Invalid {field}: {error.get('msg')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Регистрация обработчиков ошибок с единым форматом ответа"""

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        return error_response(exc.status_code, exc.error_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = describe_validation_error(exc)
        logger.info(f"Validation failed for {request.method} {request.url.path}: {message}")
        return error_response(
            ValidationError.status_code, ValidationError.error_code, message
        )

    @app.exception_handler(RepositoryError)
    async def handle_repository_error(request: Request, exc: RepositoryError):
        logger.error(f"Repository error on {request.method} {request.url.path}: {exc}")
        return error_response(
            InternalServerError.status_code,
            InternalServerError.error_code,
            InternalServerError.default_message,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(
            InternalServerError.status_code,
            InternalServerError.error_code,
            InternalServerError.default_message,
        )
