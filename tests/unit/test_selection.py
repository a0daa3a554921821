"""Tests for the service catalog registry and selection state."""

import pytest

from estimator.core.exceptions import UnknownServiceKeyError
from estimator.core.pricing_rules import ServiceCategory
from estimator.services.catalog.selection import ServiceCatalog, ServiceSelection


def test_initial_selection_has_core_services_only(selection: ServiceSelection) -> None:
    """A new selection starts with the three core services."""
    assert selection.selected_keys() == ["coreAccounting", "bankRec", "auditPrep"]


def test_toggle_flips_only_the_named_key(selection: ServiceSelection) -> None:
    """Toggling changes exactly one flag."""
    before = dict(selection.snapshot())

    assert selection.toggle("studentAR") is True

    after = dict(selection.snapshot())
    assert after.pop("studentAR") is True
    before.pop("studentAR")
    assert after == before


def test_toggle_twice_restores_selection(selection: ServiceSelection) -> None:
    """Toggle is its own inverse for every key."""
    original = dict(selection.snapshot())

    for key in selection.catalog.keys():
        selection.toggle(key)
        selection.toggle(key)

    assert dict(selection.snapshot()) == original


def test_base_included_service_can_be_deselected(selection: ServiceSelection) -> None:
    """Core services are toggleable like any other."""
    assert selection.toggle("bankRec") is False
    assert not selection.is_selected("bankRec")


def test_toggle_unknown_key_raises_and_keeps_state(selection: ServiceSelection) -> None:
    """Unknown keys fail loudly and nothing changes."""
    original = dict(selection.snapshot())

    with pytest.raises(UnknownServiceKeyError) as exc_info:
        selection.toggle("cafeteria")

    assert exc_info.value.key == "cafeteria"
    assert dict(selection.snapshot()) == original


def test_set_and_reset(selection: ServiceSelection) -> None:
    """Explicit flags can be set and the defaults restored."""
    selection.set("hr", True)
    selection.set("coreAccounting", False)
    assert selection.selected_keys() == ["bankRec", "auditPrep", "hr"]

    selection.reset()
    assert selection.selected_keys() == ["coreAccounting", "bankRec", "auditPrep"]


def test_snapshot_is_read_only_copy(selection: ServiceSelection) -> None:
    """Snapshots cannot be mutated and do not follow later toggles."""
    snapshot = selection.snapshot()

    with pytest.raises(TypeError):
        snapshot["hr"] = True  # type: ignore[index]

    selection.toggle("hr")
    assert snapshot["hr"] is False


def test_initial_flags_overlay_defaults(catalog: ServiceCatalog) -> None:
    """Flags passed at construction override the defaults for those keys only."""
    selection = ServiceSelection(catalog, {"studentAR": True, "auditPrep": False})

    assert selection.selected_keys() == ["coreAccounting", "bankRec", "studentAR"]


def test_initial_flags_with_unknown_key_are_rejected(catalog: ServiceCatalog) -> None:
    """Unknown keys are rejected when building a selection."""
    with pytest.raises(UnknownServiceKeyError):
        ServiceSelection(catalog, {"unknown": True})


def test_catalog_groups_by_category(catalog: ServiceCatalog) -> None:
    """Grouping covers every category and keeps catalog order."""
    groups = catalog.by_category()

    assert list(groups) == list(ServiceCategory)
    assert [service.key for service in groups[ServiceCategory.STUDENT_ACCOUNTS]] == [
        "studentAR",
        "studentAccounts",
        "studentAP",
    ]
    assert sum(len(services) for services in groups.values()) == len(catalog)


def test_catalog_get_unknown_key(catalog: ServiceCatalog) -> None:
    """Lookups of unknown keys raise the domain error."""
    assert catalog.get("hr").name == "HR Documentation"
    with pytest.raises(UnknownServiceKeyError):
        catalog.get("nope")


def test_catalog_rejects_duplicate_keys(catalog: ServiceCatalog) -> None:
    """A catalog cannot hold two services with the same key."""
    service = catalog.get("hr")
    with pytest.raises(ValueError):
        ServiceCatalog([service, service])
