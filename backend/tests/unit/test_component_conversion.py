"""Unit tests for converting components to and from their wire form."""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from hausdog.application.schemas import ComponentApi, from_component_api, to_component_api
from hausdog.domain.entities import Component


def _component(**overrides) -> Component:
    fields = {
        "system_id": "5d6f4f8e-2b1c-4c3a-9a7e-0f1e2d3c4b5a",
        "name": "Blower motor",
        "manufacturer": "Carrier",
        "model": "BM-100",
        "serial_number": "SN-42",
        "install_date": date(2019, 6, 15),
        "warranty_expires": date(2029, 6, 15),
        "notes": "Replaced bearings in 2022",
        "created_at": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 2, 3, 4, 5, 6, 789000, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Component(**fields)


def test_dates_become_iso_strings():
    api = to_component_api(_component())

    assert api.install_date == "2019-06-15"
    assert api.warranty_expires == "2029-06-15"
    assert api.created_at == "2024-01-02T03:04:05+00:00"


@pytest.mark.parametrize(
    "component",
    [
        _component(),
        _component(
            manufacturer=None,
            model=None,
            serial_number=None,
            install_date=None,
            warranty_expires=None,
            notes=None,
        ),
    ],
)
def test_round_trip_preserves_component(component: Component):
    assert from_component_api(to_component_api(component)) == component


def test_wire_form_rejects_malformed_dates():
    payload = to_component_api(_component()).model_dump() | {"install_date": "15/06/2019"}
    with pytest.raises(ValidationError):
        ComponentApi.model_validate(payload)
