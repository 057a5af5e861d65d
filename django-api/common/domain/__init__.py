from common.domain.errors import (
    AuthenticationError,
    BusinessRuleError,
    DomainError,
    ErrorCode,
    GatewayError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)
from common.domain.models import Actor, Page, PageRequest, Role

__all__ = [
    "Actor",
    "AuthenticationError",
    "BusinessRuleError",
    "DomainError",
    "ErrorCode",
    "GatewayError",
    "InvalidInputError",
    "NotAuthorizedError",
    "NotFoundError",
    "Page",
    "PageRequest",
    "Role",
]
