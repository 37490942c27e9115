"""Tools for external service integration."""

from .validation_service import ValidationService, ValidationServiceClient

__all__ = ["ValidationService", "ValidationServiceClient"]
