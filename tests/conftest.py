"""Pytest configuration shared by the buffer tests."""

import pytest

import curses_chstr as cs
from curses_chstr.config import ChstrConfig, set_default_config


@pytest.fixture(autouse=True)
def isolated_config():
    """Pin the process-wide config so CURSES_CHSTR_* variables don't leak in."""
    config = ChstrConfig()
    set_default_config(config)
    yield config
    set_default_config(None)


@pytest.fixture
def five() -> cs.AttrBuffer:
    """A five cell buffer holding 'abcde' in bold."""
    return cs.chstr("abcde", cs.A_BOLD)


@pytest.fixture
def limited_config() -> ChstrConfig:
    """Config that refuses buffers larger than 8 cells."""
    return ChstrConfig(max_capacity=8)
