"""
Unit tests for ReconcileRow and SubmitRow command handlers.

Submission must never reach the transport when reconciliation fails, and
transport failures must surface unchanged so the caller can retry.
"""
import pytest
from unittest.mock import Mock

from livestock_ledger.application.commands.reconcile_row import (
    ReconcileRowCommand,
    ReconcileRowHandler,
)
from livestock_ledger.application.commands.submit_row import SubmitRowCommand, SubmitRowHandler
from livestock_ledger.domain.exceptions import (
    DuplicateFieldMappingError,
    InvalidDateError,
    NoActiveMappingError,
    TransportError,
)
from livestock_ledger.domain.services.reconciliation_engine import RowReconciler
from livestock_ledger.domain.value_objects.duplicate_policy import DuplicateMappingPolicy
from livestock_ledger.infrastructure.transport.ledger_client import TransportAcknowledgement


@pytest.fixture
def reconcile_handler(registry_repository):
    return ReconcileRowHandler(registry_repository)


@pytest.fixture
def mock_transport():
    transport = Mock()
    transport.send = Mock(return_value=TransportAcknowledgement(status_code=200, message="ok"))
    return transport


def _command(cls, row, **overrides):
    params = {
        "row": row,
        "mapping": {"breed": "sheep", "owner": "name"},
        "transaction_date": "14030101",
    }
    params.update(overrides)
    return cls(**params)


class TestReconcileRowHandler:
    def test_builds_payload_from_string_mapping(self, reconcile_handler, ledger_row, registry_repository):
        payload = reconcile_handler.handle(_command(ReconcileRowCommand, ledger_row))

        assert payload.to_dict()["mappedData"] == {"sheep": 15, "name": 101}
        assert registry_repository.load_calls == 1

    def test_passes_selection_and_edits(self, reconcile_handler, ledger_row):
        command = _command(
            ReconcileRowCommand,
            ledger_row,
            selected_identity=108,
            values={"breed": "۷"},
        )
        payload = reconcile_handler.handle(command)
        assert payload.to_dict()["mappedData"] == {"sheep": 7, "name": 108}

    def test_uses_configured_policy(self, registry_repository, ledger_row):
        handler = ReconcileRowHandler(registry_repository, RowReconciler(DuplicateMappingPolicy.STRICT))
        command = _command(ReconcileRowCommand, ledger_row, mapping={"breed": "cow", "owner": "cow"})
        with pytest.raises(DuplicateFieldMappingError):
            handler.handle(command)

    def test_errors_propagate(self, reconcile_handler, ledger_row):
        with pytest.raises(NoActiveMappingError):
            reconcile_handler.handle(_command(ReconcileRowCommand, ledger_row, mapping={}))


class TestSubmitRowHandler:
    def test_sends_reconciled_payload(self, reconcile_handler, mock_transport, ledger_row):
        handler = SubmitRowHandler(reconcile_handler, mock_transport)

        result = handler.handle(_command(SubmitRowCommand, ledger_row))

        mock_transport.send.assert_called_once()
        sent = mock_transport.send.call_args.args[0]
        assert sent.to_dict() == result.payload
        assert result.row_id == "row-1"
        assert result.status_code == 200
        assert result.message == "ok"
        assert result.dry_run is False

    def test_validation_failure_blocks_transport(self, reconcile_handler, mock_transport, ledger_row):
        handler = SubmitRowHandler(reconcile_handler, mock_transport)

        with pytest.raises(InvalidDateError):
            handler.handle(_command(SubmitRowCommand, ledger_row, transaction_date="not-a-date"))

        mock_transport.send.assert_not_called()

    def test_transport_failure_surfaces(self, reconcile_handler, mock_transport, ledger_row):
        mock_transport.send.side_effect = TransportError("Server Error: 500", status_code=500)
        handler = SubmitRowHandler(reconcile_handler, mock_transport)

        with pytest.raises(TransportError) as exc_info:
            handler.handle(_command(SubmitRowCommand, ledger_row))
        assert exc_info.value.status_code == 500

    def test_resubmission_sends_identical_payload(self, reconcile_handler, mock_transport, ledger_row):
        handler = SubmitRowHandler(reconcile_handler, mock_transport)
        command = _command(SubmitRowCommand, ledger_row)

        first = handler.handle(command)
        second = handler.handle(command)

        assert first.payload == second.payload
        assert mock_transport.send.call_count == 2
