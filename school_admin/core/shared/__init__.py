"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
"""

from .exceptions import (
    DomainException,
    ValidationError,
    RequiredFieldError,
    InvalidIdentifierError,
    EntityNotFoundError,
    NotFoundError,
    BusinessRuleViolationError,
    DuplicateIdentifierError,
)
from .interfaces import UnitOfWork, Repository

__all__ = [
    "DomainException",
    "ValidationError",
    "RequiredFieldError",
    "InvalidIdentifierError",
    "EntityNotFoundError",
    "NotFoundError",
    "BusinessRuleViolationError",
    "DuplicateIdentifierError",
    "UnitOfWork",
    "Repository",
]
