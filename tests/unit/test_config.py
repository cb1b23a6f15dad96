"""Tests for relvar configuration loading."""

import tempfile
from pathlib import Path

import pydantic
import pytest

from relvar.core.config import RelvarConfig, load_config


def write_config(directory: str, text: str) -> Path:
    path = Path(directory) / "relvar.yaml"
    path.write_text(text)
    return path


def test_defaults():
    config = RelvarConfig()
    assert config.locale == "en"
    assert config.validate_defaults is True


def test_load_config():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = write_config(temp_dir, "locale: tr_TR\nvalidate_defaults: false\n")
        config = load_config(path)
    assert config.locale == "tr_TR"
    assert config.validate_defaults is False


def test_empty_config_file():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = write_config(temp_dir, "")
        with pytest.raises(ValueError, match="empty or invalid"):
            load_config(path)


def test_missing_config_file():
    with pytest.raises(FileNotFoundError):
        load_config("/nonexistent/relvar.yaml")


def test_extra_keys_are_forbidden():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = write_config(temp_dir, "locale: en\nstrict: true\n")
        with pytest.raises(pydantic.ValidationError):
            load_config(path)


def test_blank_locale_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        RelvarConfig(locale="  ")


def test_config_is_frozen():
    config = RelvarConfig()
    with pytest.raises(pydantic.ValidationError):
        config.locale = "tr"
