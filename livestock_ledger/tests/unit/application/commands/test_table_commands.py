"""Unit tests for ExtractTable and ImportTable command handlers."""
import pytest
from unittest.mock import Mock

from livestock_ledger.application.commands.extract_table import ExtractTableCommand, ExtractTableHandler
from livestock_ledger.application.commands.import_table import ImportTableCommand, ImportTableHandler
from livestock_ledger.domain.entities.extracted_table import ExtractedTable
from livestock_ledger.domain.exceptions import (
    DomainValidationError,
    ExtractionError,
    MalformedTabularTextError,
)


class TestExtractTableHandler:
    def test_delegates_to_extractor(self):
        table = ExtractedTable.from_grid(["a"], [["1"]])
        extractor = Mock()
        extractor.extract_table = Mock(return_value=table)

        result = ExtractTableHandler(extractor).handle(ExtractTableCommand(data=b"png", media_type="image/png"))

        assert result is table
        image = extractor.extract_table.call_args.args[0]
        assert image.data == b"png"
        assert image.media_type == "image/png"

    @pytest.mark.parametrize("data, media_type", [(b"", "image/png"), (b"%PDF", "application/pdf")])
    def test_rejects_invalid_upload(self, data, media_type):
        extractor = Mock()
        with pytest.raises(DomainValidationError):
            ExtractTableHandler(extractor).handle(ExtractTableCommand(data=data, media_type=media_type))
        extractor.extract_table.assert_not_called()

    def test_extraction_error_propagates(self):
        extractor = Mock()
        extractor.extract_table = Mock(side_effect=ExtractionError("Failed to extract data from image."))
        with pytest.raises(ExtractionError):
            ExtractTableHandler(extractor).handle(ExtractTableCommand(data=b"x", media_type="image/jpeg"))


class TestImportTableHandler:
    def test_imports_utf8_csv(self):
        content = '\ufeff"name","count"\n"علی","۱۲"'.encode("utf-8")
        table = ImportTableHandler().handle(ImportTableCommand(content=content, filename="data.csv"))
        assert table.columns == ("name", "count")
        assert table.to_grid() == [["علی", "۱۲"]]

    def test_rejects_non_utf8(self):
        with pytest.raises(MalformedTabularTextError, match="UTF-8"):
            ImportTableHandler().handle(ImportTableCommand(content=b"\xff\xfe\x00bad"))

    def test_rejects_empty_file(self):
        with pytest.raises(MalformedTabularTextError):
            ImportTableHandler().handle(ImportTableCommand(content=b""))
