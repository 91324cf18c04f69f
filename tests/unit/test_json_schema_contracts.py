"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Согласованность CalculationResult.to_dict() со схемой результата
- evaluate_request end-to-end
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    CalculationRequestValidator,
    CalculationResultValidator,
    SchemaLoader,
    validate_calculation_request,
    validate_calculation_result,
)
from src.engine import BigIntCalculator


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный calculation_request."""
    return {"left": "100", "operator": "/", "right": "7"}


@pytest.fixture
def valid_result():
    """Валидный calculation_result."""
    return {
        "ok": True,
        "operator": "/",
        "values": ["14", "2"],
        "error_kind": None,
        "error_message": "",
        "advisories": [],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_loads_and_caches(self):
        loader = SchemaLoader()
        first = loader.load_schema("calculation_request")
        assert loader.load_schema("calculation_request") is first
        assert first["title"] == "Calculation request"

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# REQUEST CONTRACT
# =============================================================================


class TestCalculationRequestContract:
    """Тесты calculation_request."""

    def test_valid(self, valid_request):
        validate_calculation_request(valid_request)
        assert CalculationRequestValidator().is_valid(valid_request)

    def test_missing_field(self, valid_request):
        del valid_request["operator"]
        with pytest.raises(ValidationError):
            validate_calculation_request(valid_request)

    def test_wrong_type(self, valid_request):
        valid_request["left"] = 100
        with pytest.raises(ValidationError):
            validate_calculation_request(valid_request)

    def test_extra_field(self, valid_request):
        valid_request["base"] = "10"
        assert not CalculationRequestValidator().is_valid(valid_request)

    def test_iter_errors(self):
        errors = list(CalculationRequestValidator().iter_errors({}))
        assert len(errors) == 3  # по одной ошибке required на поле


# =============================================================================
# RESULT CONTRACT
# =============================================================================


class TestCalculationResultContract:
    """Тесты calculation_result."""

    def test_valid(self, valid_result):
        validate_calculation_result(valid_result)

    def test_success_requires_values(self, valid_result):
        valid_result["values"] = []
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_result)

    def test_failure_requires_kind(self, valid_result):
        valid_result.update(ok=False, values=[], error_kind=None)
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_result)

    def test_unknown_kind(self, valid_result):
        valid_result.update(ok=False, values=[], error_kind="Overflow")
        assert not CalculationResultValidator().is_valid(valid_result)

    def test_value_pattern(self, valid_result):
        valid_result["values"] = ["--14"]
        assert not CalculationResultValidator().is_valid(valid_result)

    def test_engine_results_conform(self):
        calculator = BigIntCalculator()
        validator = CalculationResultValidator()
        samples = [
            ("999", "+", "1"),
            ("100", "-", "999"),
            ("123", "*", "456"),
            ("100", "/", "7"),
            ("2", "^", "10"),
            ("1", "^", "5000"),
            ("5", "/", "0"),
            ("2", "^", "9999999"),
            ("5", "%", "3"),
            ("", "+", "1"),
            ("1x", "+", "1"),
        ]
        for left, op, right in samples:
            validator.validate(calculator.evaluate(left, op, right).to_dict())

    def test_expression_failure_conforms(self):
        validate_calculation_result(BigIntCalculator().evaluate_expression("12345").to_dict())


# =============================================================================
# END-TO-END
# =============================================================================


class TestEvaluateRequest:
    """Тесты BigIntCalculator.evaluate_request."""

    def test_success(self, valid_request):
        result = BigIntCalculator().evaluate_request(valid_request)
        assert result["ok"] is True
        assert result["values"] == ["14", "2"]

    def test_tagged_error(self):
        result = BigIntCalculator().evaluate_request({"left": "5", "operator": "/", "right": "0"})
        assert result["ok"] is False
        assert result["error_kind"] == "DivisionByZero"

    def test_malformed_payload(self):
        with pytest.raises(ValidationError):
            BigIntCalculator().evaluate_request({"left": "5", "right": "0"})
