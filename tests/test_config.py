"""
Tests for runtime configuration.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from termloop.config import RuntimeConfig


def test_defaults_are_unbounded_with_chain_guard() -> None:
    config = RuntimeConfig()

    assert config.action_queue_capacity is None
    assert config.max_action_chain == 64
    assert config.alt_screen is True
    assert config.coalesce_renders is False
    assert config.frame_interval == pytest.approx(1 / 30)
    assert config.tick_interval == pytest.approx(0.25)


def test_from_env_reads_prefixed_variables() -> None:
    config = RuntimeConfig.from_env(
        {
            "TERMLOOP_TICK_RATE": "10",
            "TERMLOOP_FRAME_RATE": "60",
            "TERMLOOP_ACTION_QUEUE_CAPACITY": "128",
            "TERMLOOP_OVERFLOW_POLICY": "drop_oldest",
            "TERMLOOP_MAX_ACTION_CHAIN": "none",
            "TERMLOOP_ALT_SCREEN": "false",
            "TERMLOOP_LOG_FILE": "/tmp/termloop.log",
            "UNRELATED": "1",
        }
    )

    assert config.tick_rate == 10.0
    assert config.frame_rate == 60.0
    assert config.action_queue_capacity == 128
    assert config.overflow_policy == "drop_oldest"
    assert config.max_action_chain is None
    assert config.alt_screen is False
    assert config.log_file == "/tmp/termloop.log"


def test_from_env_without_variables_gives_defaults() -> None:
    assert RuntimeConfig.from_env({}) == RuntimeConfig()


@pytest.mark.parametrize(
    "name, value",
    [
        ("TERMLOOP_FRAME_RATE", "0"),
        ("TERMLOOP_TICK_RATE", "fast"),
        ("TERMLOOP_OVERFLOW_POLICY", "block"),
        ("TERMLOOP_ACTION_QUEUE_CAPACITY", "0"),
    ],
)
def test_invalid_values_are_rejected(name: str, value: str) -> None:
    with pytest.raises(ValidationError):
        RuntimeConfig.from_env({name: value})
