"""
Tests for JSON Schema Contract Validators

Тестирование контракта integration_report:
- Валидность самой схемы
- Валидация отчёта IntegrationResult.to_report()
- Детекция нарушений required полей, типов и constraints
"""

import json
from decimal import Decimal
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

import src.core.contracts as contracts_pkg
from src.core.contracts import (
    IntegrationReportValidator,
    SchemaLoader,
    validate_integration_report,
)
from src.core.domain import IntegrationResult, PrecisionContext
from src.quadrature import refine_integral


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_report():
    """Валидный отчёт для тестирования."""
    return IntegrationResult(
        value=Decimal("0.58333333"),
        start=Decimal(0),
        end=Decimal(1),
        parts=2,
        iterations=1,
        delta=Decimal(0),
        digits=8,
    ).to_report()


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:

    def test_default_schemas_ship_with_package(self) -> None:
        """Схемы лежат внутри пакета src.core.contracts, а не в корне репозитория."""
        loader = SchemaLoader()
        package_dir = Path(contracts_pkg.__file__).parent
        assert Path(str(loader.schema_dir)) == package_dir / "schema"
        assert (loader.schema_dir / "integration_report.json").is_file()

    def test_schema_is_valid(self) -> None:
        schema = SchemaLoader().load_schema("integration_report")
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("integration_report") is loader.load_schema("integration_report")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# INTEGRATION REPORT
# =============================================================================


class TestIntegrationReport:

    def test_report_decimals_serialized_as_strings(self, valid_report) -> None:
        assert valid_report["value"] == "0.58333333"
        assert isinstance(valid_report["delta"], str)
        assert valid_report["parts"] == 2

    def test_valid_report(self, valid_report) -> None:
        validate_integration_report(valid_report)
        assert IntegrationReportValidator().is_valid(valid_report)

    def test_report_from_refinement(self) -> None:
        result = refine_integral(lambda x: x.exp(), 0, 1, PrecisionContext(digits=6))
        report = result.to_report()
        validate_integration_report(report)
        assert json.loads(json.dumps(report)) == report

    def test_exponent_notation_accepted(self, valid_report) -> None:
        valid_report["delta"] = "1E-9"
        valid_report["value"] = "-2.5E+3"
        validate_integration_report(valid_report)

    @pytest.mark.parametrize(
        "field", ["value", "start", "end", "parts", "iterations", "delta", "digits"]
    )
    def test_missing_required_field(self, valid_report, field: str) -> None:
        del valid_report[field]
        with pytest.raises(ValidationError):
            validate_integration_report(valid_report)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("parts", 0),
            ("digits", 0),
            ("iterations", -1),
            ("value", "abc"),
            ("value", 0.5),
            ("delta", "-1E-9"),
        ],
    )
    def test_constraint_violations(self, valid_report, field: str, value) -> None:
        valid_report[field] = value
        with pytest.raises(ValidationError):
            validate_integration_report(valid_report)

    def test_additional_properties_rejected(self, valid_report) -> None:
        valid_report["extra"] = 1
        errors = list(IntegrationReportValidator().iter_errors(valid_report))
        assert len(errors) == 1
