import pytest

from backend.config import ERROR_MARKER, MAX_DIGITS, CalculatorConfig


def test_defaults():
    config = CalculatorConfig()
    assert config.max_digits == MAX_DIGITS == 20
    assert config.error_marker == ERROR_MARKER
    assert config.suppress_zero_result is False
    assert config.log_level == "WARNING"


def test_from_env(monkeypatch):
    monkeypatch.setenv("CALC_MAX_DIGITS", "12")
    monkeypatch.setenv("CALC_SUPPRESS_ZERO_RESULT", "yes")
    monkeypatch.setenv("CALC_LOG_LEVEL", "debug")
    config = CalculatorConfig.from_env()
    assert config.max_digits == 12
    assert config.suppress_zero_result is True
    assert config.log_level == "DEBUG"


def test_from_env_defaults(monkeypatch):
    for name in ("CALC_MAX_DIGITS", "CALC_SUPPRESS_ZERO_RESULT", "CALC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert CalculatorConfig.from_env() == CalculatorConfig()


def test_error_marker_must_fit_display():
    with pytest.raises(ValueError):
        CalculatorConfig(max_digits=5)
    assert CalculatorConfig(max_digits=5, error_marker="Err").error_marker == "Err"


@pytest.mark.parametrize("name, value", [
    ("CALC_MAX_DIGITS", "many"),
    ("CALC_MAX_DIGITS", "1"),
    ("CALC_SUPPRESS_ZERO_RESULT", "maybe"),
    ("CALC_LOG_LEVEL", "LOUD"),
])
def test_from_env_rejects_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        CalculatorConfig.from_env()
