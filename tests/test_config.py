import importlib

import pytest

import config

KEYS = ("PLAYGROUND_NAME", "PLAYGROUND_SCORE", "PLAYGROUND_INCREMENTS", "VERBOSE")


@pytest.fixture
def env(monkeypatch):
    for key in KEYS:
        monkeypatch.delenv(key, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(env):
    cfg = importlib.reload(config).Config
    assert cfg.PLAYGROUND_NAME == "Fred"
    assert cfg.PLAYGROUND_SCORE == 0
    assert cfg.PLAYGROUND_INCREMENTS == 1
    assert cfg.VERBOSE is True


def test_environment_overrides(env):
    env.setenv("PLAYGROUND_NAME", "Ann")
    env.setenv("PLAYGROUND_SCORE", "5")
    env.setenv("PLAYGROUND_INCREMENTS", "3")
    env.setenv("VERBOSE", "0")
    cfg = importlib.reload(config).Config
    assert (cfg.PLAYGROUND_NAME, cfg.PLAYGROUND_SCORE, cfg.PLAYGROUND_INCREMENTS) == ("Ann", 5, 3)
    assert cfg.VERBOSE is False


def test_non_integer_score_raises(env):
    env.setenv("PLAYGROUND_SCORE", "lots")
    with pytest.raises(ValueError):
        importlib.reload(config)
