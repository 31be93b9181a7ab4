"""Service layer — business logic orchestration."""


class ServiceError(Exception):
    """Base service exception."""


class ValidationError(ServiceError):
    """Input violates a business rule (-> HTTP 400)."""
