"""Repositories — transactional record access per kind."""

from pastelaria.infrastructure.repositories.entity import EntityKind, EntityRepository, WriteHook
from pastelaria.infrastructure.repositories.kinds import (
    CUSTOMER,
    KINDS,
    PRODUCT,
    PRODUCT_TYPE,
    customer_repository,
    product_repository,
    product_type_repository,
    repository_for,
)

__all__ = [
    "CUSTOMER",
    "KINDS",
    "PRODUCT",
    "PRODUCT_TYPE",
    "EntityKind",
    "EntityRepository",
    "WriteHook",
    "customer_repository",
    "product_repository",
    "product_type_repository",
    "repository_for",
]
