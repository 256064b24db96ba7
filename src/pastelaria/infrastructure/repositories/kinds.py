"""Record kinds and repository factories.

Per-kind behaviour is declared here, not in repository subclasses:
products add a product-type guard and image ingestion, the others use
the bare lifecycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pastelaria.domain.records import Customer, Product, ProductType
from pastelaria.infrastructure.database.schema import customers, product_types, products
from pastelaria.infrastructure.repositories.entity import EntityKind, EntityRepository
from pastelaria.infrastructure.repositories.hooks import ActiveReferenceGuard, ImageIngestion

if TYPE_CHECKING:
    from pastelaria.infrastructure.datastore import DataStore

CUSTOMER: EntityKind[Customer] = EntityKind(
    name="customer",
    table=customers,
    model=Customer,
    fields=(
        "name",
        "email",
        "phone",
        "date_of_birth",
        "address",
        "complement",
        "neighborhood",
        "zip_code",
    ),
)

PRODUCT_TYPE: EntityKind[ProductType] = EntityKind(
    name="product_type",
    table=product_types,
    model=ProductType,
    fields=("name",),
)

# Guard runs before ingestion so a bad type fails before any file is written.
PRODUCT: EntityKind[Product] = EntityKind(
    name="product",
    table=products,
    model=Product,
    fields=("name", "price", "product_type_id", "photo"),
    hooks=(
        ActiveReferenceGuard("product_type_id", product_types, "product_type"),
        ImageIngestion("photo"),
    ),
)

KINDS: dict[str, EntityKind[Any]] = {
    kind.name: kind for kind in (CUSTOMER, PRODUCT_TYPE, PRODUCT)
}


def customer_repository(store: DataStore) -> EntityRepository[Customer]:
    return EntityRepository(store, CUSTOMER)


def product_type_repository(store: DataStore) -> EntityRepository[ProductType]:
    return EntityRepository(store, PRODUCT_TYPE)


def product_repository(store: DataStore) -> EntityRepository[Product]:
    return EntityRepository(store, PRODUCT)


def repository_for(store: DataStore, kind_name: str) -> EntityRepository[Any]:
    """Build the repository for *kind_name*.

    Raises:
        KeyError: If *kind_name* is not a known record kind.
    """
    return EntityRepository(store, KINDS[kind_name])
