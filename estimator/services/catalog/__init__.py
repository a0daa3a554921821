"""Service catalog and operator selection state."""

from estimator.services.catalog.selection import (
    ServiceCatalog,
    ServiceSelection,
    service_catalog,
)

__all__ = [
    "ServiceCatalog",
    "ServiceSelection",
    "service_catalog",
]
