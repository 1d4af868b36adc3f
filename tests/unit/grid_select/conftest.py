"""Shared fixtures for select codec tests."""

from __future__ import annotations

import pytest

from grid_select.api import SelectOption, SelectOptionColor, set_config


@pytest.fixture
def google() -> SelectOption:
    return SelectOption(id="g00g", name="Google", color=SelectOptionColor.PURPLE)


@pytest.fixture
def facebook() -> SelectOption:
    return SelectOption(id="fb00", name="Facebook", color=SelectOptionColor.PINK)


@pytest.fixture
def twitter() -> SelectOption:
    return SelectOption(id="tw00", name="Twitter", color=SelectOptionColor.LIGHT_PINK)


@pytest.fixture
def platform_options(google, facebook, twitter) -> list[SelectOption]:
    return [google, facebook, twitter]


@pytest.fixture(autouse=True)
def reset_codec_config(monkeypatch):
    """Keep env overrides and the process config from leaking between tests."""
    monkeypatch.delenv("GS_OPTION_ID_LENGTH", raising=False)
    monkeypatch.delenv("GS_OPTION_ID_ALPHABET", raising=False)
    set_config(None)
    yield
    set_config(None)
