"""Tests for the printer resource."""

import pytest

from src.domain.core.exceptions import ValidationError
from src.domain.document.aggregate import Document
from src.domain.printer.aggregate import Printer
from src.domain.printer.value_objects import PrinterMode


@pytest.mark.unit
class TestPrinter:
    """Test cases for Printer."""

    def test_default_mode(self):
        assert Printer().mode == PrinterMode.GRAYSCALE

    def test_set_mode_accepts_strings(self):
        printer = Printer()
        printer.set_mode("COLOR")
        assert printer.mode == PrinterMode.COLOR

    def test_invalid_mode(self):
        with pytest.raises(ValidationError):
            Printer().set_mode("sepia")

    def test_print_document_records_job(self):
        printer = Printer(mode="color")

        first = printer.print_document(Document(title="Report"))
        printer.set_mode(PrinterMode.DRAFT)
        second = printer.print_document("Memo")

        assert first.job_id == 1
        assert first.mode == PrinterMode.COLOR
        assert second.job_id == 2
        assert second.mode == PrinterMode.DRAFT
        assert printer.job_count == 2
        assert [job.title for job in printer.jobs] == ["Report", "Memo"]
        assert str(first) == "Job 1: 'Report' in color mode"

    def test_jobs_returns_copy(self):
        printer = Printer()
        printer.print_document("Memo")

        printer.jobs.clear()

        assert printer.job_count == 1

    def test_print_without_title(self):
        with pytest.raises(ValidationError):
            Printer().print_document(object())
