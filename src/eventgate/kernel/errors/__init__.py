"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvalidTransitionError
    │   ├── UnknownPriorStateError
    │   └── ValidationError
    │       └── RemarksRequiredError
    └── ApplicationError         (base.py)
        └── ConfigError          (eventgate.config.validation)
"""

from eventgate.kernel.errors.base import ApplicationError, BaseError
from eventgate.kernel.errors.domain import (
    DomainError,
    InvalidTransitionError,
    RemarksRequiredError,
    UnknownPriorStateError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidTransitionError",
    "RemarksRequiredError",
    "UnknownPriorStateError",
    "ValidationError",
]
