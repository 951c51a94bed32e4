import pytest

from inventario.utils.config import AppConfig
from inventario.utils.exceptions import ConfigurationError


def test_defaults_from_empty_environment():
    config = AppConfig.from_env({})
    assert config.port == 8051
    assert config.debug is True
    assert config.feed_interval == 5.0
    assert config.feed_seed is None
    assert config.autoconnect is True


def test_values_from_environment():
    config = AppConfig.from_env({
        "PORT": "9000",
        "FLASK_ENV": "production",
        "INVENTARIO_FEED_INTERVAL": "0.5",
        "INVENTARIO_FEED_SEED": "42",
        "INVENTARIO_AUTOCONNECT": "no",
    })
    assert config.to_dict() == {
        "port": 9000,
        "debug": False,
        "feed_interval": 0.5,
        "feed_seed": 42,
        "autoconnect": False,
    }


@pytest.mark.parametrize("env", [
    {"PORT": "abc"},
    {"PORT": "70000"},
    {"PORT": "0"},
    {"INVENTARIO_FEED_INTERVAL": "0"},
    {"INVENTARIO_FEED_INTERVAL": "-1"},
    {"INVENTARIO_FEED_INTERVAL": "nan"},
    {"INVENTARIO_FEED_INTERVAL": "rapido"},
    {"INVENTARIO_FEED_SEED": "x"},
    {"INVENTARIO_AUTOCONNECT": "quizas"},
])
def test_invalid_values_raise_configuration_error(env):
    with pytest.raises(ConfigurationError):
        AppConfig.from_env(env)


@pytest.mark.parametrize("valor,esperado", [("1", True), ("SI", True), (" on ", True), ("0", False), ("off", False)])
def test_autoconnect_accepts_common_booleans(valor, esperado):
    assert AppConfig.from_env({"INVENTARIO_AUTOCONNECT": valor}).autoconnect is esperado
