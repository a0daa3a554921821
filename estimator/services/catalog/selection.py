"""Service catalog registry and per-session selection state."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from loguru import logger

from estimator.core.exceptions import UnknownServiceKeyError
from estimator.core.pricing_rules import (
    ServiceCategory,
    ServiceDefinition,
    get_all_services,
)


class ServiceCatalog:
    """Read-only registry of service definitions."""

    def __init__(self, services: Iterable[ServiceDefinition] | None = None) -> None:
        service_list = list(services) if services is not None else get_all_services()
        self._services: dict[str, ServiceDefinition] = {}
        for service in service_list:
            if service.key in self._services:
                raise ValueError(f"Duplicate service key: {service.key!r}")
            self._services[service.key] = service

    def __iter__(self) -> Iterator[ServiceDefinition]:
        return iter(self._services.values())

    def __len__(self) -> int:
        return len(self._services)

    def __contains__(self, key: object) -> bool:
        return key in self._services

    def keys(self) -> list[str]:
        """Service keys in catalog order."""
        return list(self._services)

    def get(self, key: str) -> ServiceDefinition:
        """Returns the service with the given key.

        Raises:
            UnknownServiceKeyError: If the key is not in the catalog.
        """
        try:
            return self._services[key]
        except KeyError:
            raise UnknownServiceKeyError(key) from None

    def by_category(self) -> dict[ServiceCategory, list[ServiceDefinition]]:
        """Groups services by category, keeping catalog order inside groups."""
        groups: dict[ServiceCategory, list[ServiceDefinition]] = {
            category: [] for category in ServiceCategory
        }
        for service in self._services.values():
            groups[service.category].append(service)
        return groups

    def default_selection(self) -> dict[str, bool]:
        """Selection flags a new discovery call starts with."""
        return {
            key: service.default_selected for key, service in self._services.items()
        }

    def ensure_known(self, keys: Iterable[str]) -> None:
        """Fails on the first key missing from the catalog."""
        for key in keys:
            if key not in self._services:
                raise UnknownServiceKeyError(key)


class ServiceSelection:
    """Mutable selected flags for one operator session."""

    def __init__(
        self,
        catalog: ServiceCatalog,
        flags: Mapping[str, bool] | None = None,
    ) -> None:
        self._catalog = catalog
        self._flags = catalog.default_selection()
        if flags:
            catalog.ensure_known(flags)
            self._flags.update({key: bool(value) for key, value in flags.items()})

    @property
    def catalog(self) -> ServiceCatalog:
        return self._catalog

    def is_selected(self, key: str) -> bool:
        """Current flag for the key."""
        self._catalog.ensure_known([key])
        return self._flags[key]

    def toggle(self, key: str) -> bool:
        """Flips the selected flag of one service and returns the new value.

        Raises:
            UnknownServiceKeyError: If the key is not in the catalog. The
                selection is left unchanged.
        """
        self._catalog.ensure_known([key])
        self._flags[key] = not self._flags[key]
        logger.debug("Service {} toggled to {}", key, self._flags[key])
        return self._flags[key]

    def set(self, key: str, selected: bool) -> None:
        """Sets the selected flag of one service explicitly."""
        self._catalog.ensure_known([key])
        self._flags[key] = bool(selected)

    def selected_keys(self) -> list[str]:
        """Keys of selected services in catalog order."""
        return [key for key, selected in self._flags.items() if selected]

    def snapshot(self) -> Mapping[str, bool]:
        """Immutable copy of the current flags."""
        return MappingProxyType(dict(self._flags))

    def reset(self) -> None:
        """Restores the catalog defaults."""
        self._flags = self._catalog.default_selection()


service_catalog = ServiceCatalog()
