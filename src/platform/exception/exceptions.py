class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str = 'Not authenticated') -> None:
        super().__init__(message, 401)


class PaymentRequiredError(CustomBaseError):
    def __init__(self, message: str = 'Payment information is required') -> None:
        super().__init__(message, 402)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str = 'Not allowed') -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str = 'No result for this search') -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)
