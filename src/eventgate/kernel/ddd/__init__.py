"""Kernel DDD building blocks – specifications."""
from eventgate.kernel.ddd.specification import (
    AndSpecification,
    NotSpecification,
    OrSpecification,
    Specification,
)

__all__ = ["AndSpecification", "NotSpecification", "OrSpecification", "Specification"]
