from typing import Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_content(self) -> dict:
        return {'detail': self.message}


class ValidationError(CustomBaseError):
    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message, 400)
        self.field = field

    def to_content(self) -> dict:
        content = super().to_content()
        if self.field:
            content['field'] = self.field
        return content


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str = 'Not authenticated') -> None:
        super().__init__(message, 401)


class AuthorizationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 409) -> None:
        super().__init__(message, status_code)


class CapacityError(CustomBaseError):
    def __init__(self, remaining: int) -> None:
        super().__init__(f'Not enough tickets available. Only {remaining} remaining', 400)
        self.remaining = remaining

    def to_content(self) -> dict:
        return {**super().to_content(), 'remaining': self.remaining}


class InternalError(CustomBaseError):
    def __init__(self, message: str = 'Internal server error') -> None:
        super().__init__(message, 500)
