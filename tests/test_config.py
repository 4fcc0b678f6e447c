# tests/test_config.py
import pytest

from probability import config


def test_defaults(monkeypatch):
    for name in (
        "PROBABILITY_MAX_ITERATIONS",
        "PROBABILITY_ROOT_MAX_ITERATIONS",
        "PROBABILITY_ROOT_TOLERANCE",
    ):
        monkeypatch.delenv(name, raising=False)
    cfg = config.load_config()
    assert cfg == config.NumericConfig()
    assert cfg.max_iterations == 1000
    assert cfg.root_max_iterations == 200
    assert cfg.root_tolerance == 1e-12


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PROBABILITY_MAX_ITERATIONS", "5000")
    monkeypatch.setenv("PROBABILITY_ROOT_MAX_ITERATIONS", " 50 ")
    monkeypatch.setenv("PROBABILITY_ROOT_TOLERANCE", "1e-10")
    cfg = config.load_config()
    assert cfg.max_iterations == 5000
    assert cfg.root_max_iterations == 50
    assert cfg.root_tolerance == 1e-10


@pytest.mark.parametrize(
    "name, raw",
    [
        ("PROBABILITY_MAX_ITERATIONS", "0"),
        ("PROBABILITY_MAX_ITERATIONS", "ten"),
        ("PROBABILITY_ROOT_TOLERANCE", "-1"),
    ],
)
def test_invalid_environment_values(monkeypatch, name, raw):
    monkeypatch.setenv(name, raw)
    with pytest.raises(ValueError):
        config.load_config()


def test_config_is_frozen():
    with pytest.raises(AttributeError):
        config.NUMERIC.max_iterations = 3
