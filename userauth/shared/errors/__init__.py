from .base import (
    AppError,
    DomainError,
    InfrastructureError,
    InternalError,
    InvalidTokenError,
    MissingTokenError,
    RateLimitedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "InternalError",
    "InvalidTokenError",
    "MissingTokenError",
    "RateLimitedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
