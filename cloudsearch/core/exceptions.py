__all__ = [
    "BaseError",
    "BadRequestError",
    "ConfigError",
    "ConflictError",
    "DecodeError",
    "ForbiddenError",
    "InternalError",
    "NotFoundError",
    "NotSupportedError",
    "ThrottlingError",
    "UnauthorizedError",
]


class BaseError(Exception):
    status_code: int


class BadRequestError(BaseError):
    status_code = 400


class UnauthorizedError(BaseError):
    status_code = 401


class ForbiddenError(BaseError):
    status_code = 403


class NotFoundError(BaseError):
    status_code = 404


class ConflictError(BaseError):
    status_code = 409


class NotSupportedError(BaseError):
    status_code = 415


class ThrottlingError(BaseError):
    status_code = 429


class InternalError(Exception):
    status_code = 500


class ConfigError(Exception):
    status_code = 500


class DecodeError(Exception):
    status_code = 502
