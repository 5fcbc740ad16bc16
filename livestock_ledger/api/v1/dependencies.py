"""Shared FastAPI dependencies for v1 API routers.

These factories centralize construction of repositories, adapters and
handlers so routers can depend on simple callables and tests can swap them
through ``app.dependency_overrides``.
"""
from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from livestock_ledger.application.commands.extract_table import ExtractTableHandler
from livestock_ledger.application.commands.import_table import ImportTableHandler
from livestock_ledger.application.commands.reconcile_row import ReconcileRowHandler
from livestock_ledger.application.commands.submit_row import SubmitRowHandler
from livestock_ledger.application.queries.export_table import ExportTableHandler
from livestock_ledger.application.queries.propose_mapping import ProposeMappingHandler
from livestock_ledger.application.queries.suggest_names import SuggestNamesHandler
from livestock_ledger.config import get_settings
from livestock_ledger.domain.repositories.name_registry_repository import NameRegistryRepository
from livestock_ledger.domain.services.reconciliation_engine import RowReconciler
from livestock_ledger.domain.value_objects.duplicate_policy import DuplicateMappingPolicy
from livestock_ledger.infrastructure.persistence.file_name_registry_repository import (
    FileNameRegistryRepository,
)
from livestock_ledger.infrastructure.transport.ledger_client import LedgerTransportClient
from livestock_ledger.infrastructure.vision.azure_table_extraction_client import (
    AzureTableExtractionClient,
)


@lru_cache()
def _registry_repository() -> NameRegistryRepository:
    return FileNameRegistryRepository(get_settings().name_registry_path)


def get_registry_repository() -> NameRegistryRepository:
    """Provide a singleton name registry repository instance."""
    return _registry_repository()


@lru_cache()
def _reconciler() -> RowReconciler:
    policy = DuplicateMappingPolicy.from_setting(get_settings().duplicate_mapping_policy)
    return RowReconciler(policy)


@lru_cache()
def _get_reconcile_row_handler() -> ReconcileRowHandler:
    return ReconcileRowHandler(_registry_repository(), _reconciler())


def get_reconcile_row_handler() -> ReconcileRowHandler:
    """Provide a cached ReconcileRow handler."""
    return _get_reconcile_row_handler()


@lru_cache()
def _transport_client() -> LedgerTransportClient:
    return LedgerTransportClient()


@lru_cache()
def _get_submit_row_handler() -> SubmitRowHandler:
    return SubmitRowHandler(_get_reconcile_row_handler(), _transport_client())


def get_submit_row_handler() -> SubmitRowHandler:
    """Provide a cached SubmitRow handler."""
    return _get_submit_row_handler()


@lru_cache()
def _get_extract_table_handler() -> ExtractTableHandler:
    return ExtractTableHandler(AzureTableExtractionClient())


def get_extract_table_handler() -> ExtractTableHandler:
    """Provide a cached ExtractTable handler (built on first use)."""
    try:
        return _get_extract_table_handler()
    except RuntimeError as exc:
        # Missing Azure OpenAI configuration surfaces as an unavailable collaborator.
        raise HTTPException(status_code=502, detail=str(exc)) from exc


def get_import_table_handler() -> ImportTableHandler:
    return ImportTableHandler()


def get_export_table_handler() -> ExportTableHandler:
    return ExportTableHandler()


def get_propose_mapping_handler() -> ProposeMappingHandler:
    return ProposeMappingHandler()


@lru_cache()
def _get_suggest_names_handler() -> SuggestNamesHandler:
    return SuggestNamesHandler(_registry_repository())


def get_suggest_names_handler() -> SuggestNamesHandler:
    """Provide a cached SuggestNames handler."""
    return _get_suggest_names_handler()
