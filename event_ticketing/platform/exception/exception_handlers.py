from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from event_ticketing.platform.exception.exceptions import CustomBaseError, InternalError
from event_ticketing.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc))
    return JSONResponse(status_code=error.status_code, content=error.to_content())


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': str(exc)})


def _field_from_loc(loc: tuple | list) -> str | None:
    # ('body', 'totalTickets') -> 'totalTickets'; ('query', 'status') -> 'status'
    parts = [str(part) for part in loc if part not in ('body', 'query', 'path', 'header')]
    return '.'.join(parts) or None


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    errors = error.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={'detail': 'Invalid request'}
        )

    first = errors[0]
    field = _field_from_loc(first.get('loc', ()))
    message = first.get('msg', 'Invalid value')
    content: dict[str, Any] = {'detail': f'{field}: {message}' if field else message}
    if field:
        content['field'] = field
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not getattr(exc, '_has_logged', False):
        Logger.base.exception(f'💥 [UNHANDLED] {request.method} {request.url.path}: {exc}')
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_content())


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
