"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from tokenomics_engine.core.contracts import (
    FeeConfigValidator,
    SchemaLoader,
    TokenomicsFormValidator,
    validate_fee_config_payload,
    validate_tokenomics_form_payload,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_tokenomics_form():
    """Валидное состояние формы токеномики."""
    return {
        "fundingGoal": "1000000",
        "softCap": "510000",
        "tokenPrice": "0.2",
        "amountTokensForSale": "5000000",
        "initialTotalSupply": "10000000",
        "liquidityPercentage": "80",
        "lockDuration": "14",
        "vestingEnabled": True,
        "vestingCliff": "30",
        "vestingDuration": "180",
        "vestingInterval": "30",
        "vestingInitialRelease": "10",
    }


@pytest.fixture
def valid_fee_config():
    """Валидная конфигурация комиссий AMM."""
    return {
        "tradingFee": 30,
        "protocolFee": 5,
        "feeDenominator": 10000,
        "feesEnabled": True,
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    form_schema = loader.load_schema("tokenomics_form")
    fee_schema = loader.load_schema("fee_config")

    assert form_schema["$id"] == "tokenomics_form.json"
    assert fee_schema["$id"] == "fee_config.json"


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("fee_config")
    schema2 = loader.load_schema("fee_config")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path: Path):
    """Проверка ошибки при отсутствующей директории схем."""
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path: Path):
    """Схема, не проходящая meta-validation, отклоняется."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="broken.json"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - TOKENOMICS FORM VALIDATION
# =============================================================================


def test_tokenomics_form_validator_accepts_valid_data(valid_tokenomics_form):
    """Валидация правильной формы."""
    validator = TokenomicsFormValidator()
    validator.validate(valid_tokenomics_form)  # Не должно выбросить исключение
    assert validator.is_valid(valid_tokenomics_form)


def test_tokenomics_form_validate_function(valid_tokenomics_form):
    """Проверка функции validate_tokenomics_form_payload."""
    validate_tokenomics_form_payload(valid_tokenomics_form)


def test_tokenomics_form_accepts_minimal_data():
    """Достаточно обязательных полей."""
    validate_tokenomics_form_payload(
        {"fundingGoal": "1", "tokenPrice": "1", "amountTokensForSale": "1"}
    )


def test_tokenomics_form_accepts_unknown_fields(valid_tokenomics_form):
    """Форма содержит поля других шагов (название, соцсети и т.п.)."""
    data = valid_tokenomics_form.copy()
    data["projectName"] = "Example"

    validate_tokenomics_form_payload(data)


def test_tokenomics_form_rejects_missing_required_field(valid_tokenomics_form):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_tokenomics_form.copy()
    del data["fundingGoal"]

    with pytest.raises(ValidationError) as exc_info:
        validate_tokenomics_form_payload(data)
    assert "'fundingGoal' is a required property" in str(exc_info.value)


def test_tokenomics_form_rejects_numeric_value(valid_tokenomics_form):
    """Суммы передаются строками, а не числами."""
    data = valid_tokenomics_form.copy()
    data["tokenPrice"] = 0.2

    with pytest.raises(ValidationError) as exc_info:
        validate_tokenomics_form_payload(data)
    assert "is not of type 'string'" in str(exc_info.value)


def test_tokenomics_form_rejects_string_flag(valid_tokenomics_form):
    """vestingEnabled — boolean."""
    data = valid_tokenomics_form.copy()
    data["vestingEnabled"] = "true"

    assert not TokenomicsFormValidator().is_valid(data)


def test_tokenomics_form_collects_all_errors():
    """iter_errors возвращает все нарушения сразу."""
    errors = list(TokenomicsFormValidator().iter_errors({"softCap": 1}))

    # 3 отсутствующих required поля + неправильный тип softCap
    assert len(errors) == 4


# =============================================================================
# TESTS - FEE CONFIG VALIDATION
# =============================================================================


def test_fee_config_validator_accepts_valid_data(valid_fee_config):
    """Валидация правильной конфигурации комиссий."""
    validator = FeeConfigValidator()
    validator.validate(valid_fee_config)
    assert validator.is_valid(valid_fee_config)


def test_fee_config_feesenabled_is_optional(valid_fee_config):
    data = valid_fee_config.copy()
    del data["feesEnabled"]

    validate_fee_config_payload(data)


def test_fee_config_rejects_negative_fee(valid_fee_config):
    """Отрицательная комиссия отклоняется."""
    data = valid_fee_config.copy()
    data["protocolFee"] = -1

    with pytest.raises(ValidationError):
        validate_fee_config_payload(data)


def test_fee_config_rejects_zero_denominator(valid_fee_config):
    """Нулевой знаменатель отклоняется."""
    data = valid_fee_config.copy()
    data["feeDenominator"] = 0

    with pytest.raises(ValidationError):
        validate_fee_config_payload(data)


def test_fee_config_rejects_boolean_as_integer(valid_fee_config):
    """JSON Schema не считает boolean целым числом."""
    data = valid_fee_config.copy()
    data["tradingFee"] = True

    with pytest.raises(ValidationError):
        validate_fee_config_payload(data)


def test_fee_config_rejects_unknown_fields(valid_fee_config):
    data = valid_fee_config.copy()
    data["ownerFee"] = 1

    with pytest.raises(ValidationError):
        validate_fee_config_payload(data)
