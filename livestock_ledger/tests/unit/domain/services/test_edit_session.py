"""Unit tests for RowEditSession."""
import pytest

from livestock_ledger.domain.entities.field_mapping import FieldMapping
from livestock_ledger.domain.exceptions import DomainValidationError
from livestock_ledger.domain.services.edit_session import RowEditSession
from livestock_ledger.domain.value_objects.field_type import FieldType


@pytest.fixture
def session(ledger_row, registry):
    return RowEditSession(ledger_row, registry)


def test_initial_mapping_is_classified(session):
    assert session.mapping.to_dict() == {"breed": "sheep", "owner": "name"}
    assert session.selected_identity is None
    assert session.values == {"breed": "15", "owner": "علی رضا محمدی"}


def test_unclassified_session_starts_unmapped(ledger_row, registry):
    session = RowEditSession(ledger_row, registry, classify=False)
    assert session.mapping.active_columns(ledger_row) == []


def test_explicit_mapping_is_copied(ledger_row, registry):
    mapping = FieldMapping({"breed": "cow"})
    session = RowEditSession(ledger_row, registry, mapping=mapping)
    session.change_mapping("breed", FieldType.GOAT)
    assert mapping.type_for("breed") is FieldType.COW


def test_select_suggestion_sets_text_and_identity(session, registry):
    entry = registry.find_by_id(103)
    session.select_suggestion("owner", entry)
    assert session.values["owner"] == entry.name
    assert session.selected_identity == 103
    assert session.reconcile("14030101").value_for(FieldType.PERSON_NAME) == 103


def test_typing_in_name_column_clears_selection(session, registry):
    session.select_suggestion("owner", registry.find_by_id(103))
    session.edit_value("owner", "مهدی زند")
    assert session.selected_identity is None
    # falls back to exact match on the edited text
    assert session.reconcile("14030101").value_for(FieldType.PERSON_NAME) == 110


def test_editing_other_columns_keeps_selection(session, registry):
    session.select_suggestion("owner", registry.find_by_id(103))
    session.edit_value("breed", "20")
    assert session.selected_identity == 103
    payload = session.reconcile("14030101")
    assert payload.to_dict()["mappedData"] == {"sheep": 20, "name": 103}


def test_clear_selection(session, registry):
    session.select_suggestion("owner", registry.find_by_id(103))
    session.clear_selection()
    assert session.selected_identity is None


def test_suggestions_for_current_text(session):
    suggestions = session.suggestions("owner", limit=3)
    assert len(suggestions) == 3
    assert suggestions[0][0].id == 101
    assert suggestions[0][1] == 0


def test_values_property_is_a_copy(session):
    session.values["breed"] = "999"
    assert session.values["breed"] == "15"


@pytest.mark.parametrize("action", [
    lambda s: s.edit_value("ghost", "x"),
    lambda s: s.change_mapping("ghost", "cow"),
    lambda s: s.suggestions("ghost"),
])
def test_unknown_column_rejected(session, action):
    with pytest.raises(DomainValidationError):
        action(session)
