"""Unit tests for the CanonicalPayload entity."""
import pytest

from livestock_ledger.domain.entities.canonical_payload import CanonicalPayload
from livestock_ledger.domain.entities.raw_row import RawRow
from livestock_ledger.domain.exceptions import DomainValidationError
from livestock_ledger.domain.value_objects.field_type import FieldType
from livestock_ledger.domain.value_objects.resolved_value import ResolvedValue


@pytest.fixture
def raw_row():
    return RawRow(id="r1", values={"breed": "15", "owner": "x"})


def test_to_dict_wire_shape(raw_row):
    payload = CanonicalPayload(
        date="14030101",
        mapped_data={
            FieldType.SHEEP: ResolvedValue.count(15),
            FieldType.PERSON_NAME: ResolvedValue.identity(101),
        },
        raw_row=raw_row,
    )
    assert payload.to_dict() == {
        "date": "14030101",
        "mappedData": {"sheep": 15, "name": 101},
        "rawRowData": {"id": "r1", "breed": "15", "owner": "x"},
    }
    assert payload.value_for(FieldType.SHEEP) == 15
    assert payload.value_for(FieldType.COW) is None
    assert not payload.has_unresolved_identity


def test_unresolved_identity_flag(raw_row):
    payload = CanonicalPayload("1403", {FieldType.PERSON_NAME: ResolvedValue.identity(None)}, raw_row)
    assert payload.has_unresolved_identity
    assert payload.to_dict()["mappedData"] == {"name": None}


@pytest.mark.parametrize("date", ["", "abc", "1403/01/01"])
def test_rejects_non_numeric_date(raw_row, date):
    with pytest.raises(DomainValidationError):
        CanonicalPayload(date, {FieldType.SHEEP: ResolvedValue.count(1)}, raw_row)


def test_rejects_empty_mapping(raw_row):
    with pytest.raises(DomainValidationError):
        CanonicalPayload("1403", {}, raw_row)


def test_rejects_unmapped_key(raw_row):
    with pytest.raises(DomainValidationError):
        CanonicalPayload("1403", {FieldType.UNMAPPED: ResolvedValue.count(1)}, raw_row)


def test_rejects_kind_mismatch(raw_row):
    with pytest.raises(DomainValidationError):
        CanonicalPayload("1403", {FieldType.PERSON_NAME: ResolvedValue.count(1)}, raw_row)
    with pytest.raises(DomainValidationError):
        CanonicalPayload("1403", {FieldType.COW: ResolvedValue.identity(1)}, raw_row)


def test_mapped_data_is_read_only(raw_row):
    payload = CanonicalPayload("1403", {FieldType.SHEEP: ResolvedValue.count(1)}, raw_row)
    with pytest.raises(TypeError):
        payload.mapped_data[FieldType.COW] = ResolvedValue.count(2)  # type: ignore[index]
