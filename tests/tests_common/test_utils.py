import os
import re

import pytest

from common.utils import (
    Logger,
    emit,
    require_delegate,
    get_current_time_string,
    normalize_whitespace
)


def test_get_current_time_string_format():
    time_str = get_current_time_string()
    assert re.match(r"\d{2}:\d{2}:\d{2}", time_str)  # matches HH:MM:SS

def test_normalize_whitespace_various_cases():
    assert normalize_whitespace("   Hello   World ") == "Hello World"
    assert normalize_whitespace("Multiple    spaces") == "Multiple spaces"
    assert normalize_whitespace("\nNewlines\tand tabs") == "Newlines and tabs"

def test_emit_prints_strings_and_numbers(capsys):
    emit("hello")
    emit(2.5)
    emit()

    assert capsys.readouterr().out == "hello\n2.5\n\n"

def test_require_delegate_returns_delegate():
    delegate = object()
    assert require_delegate(delegate, "Wrapper") is delegate

def test_require_delegate_rejects_none():
    with pytest.raises(ValueError, match="Wrapper requires a delegate"):
        require_delegate(None, "Wrapper")

def test_logger_initialization_creates_file(temp_logger_env):
    logger = Logger("test_logger")

    assert os.path.exists(logger.log_file)
    assert os.path.dirname(logger.log_file) == str(temp_logger_env)
    with open(logger.log_file) as f:
        content = f.read()
        assert "test_logger example started" in content

def test_logger_catalog_initialization_creates_file(temp_logger_env):
    logger = Logger("catalog_logger", is_catalog=True)

    assert os.path.exists(logger.log_file)
    with open(logger.log_file) as f:
        content = f.read()
        assert "CATALOG STARTED" in content

def test_logger_log_writes_message(temp_logger_env, capsys):
    logger = Logger("log_write_test")

    logger.log("Test Message", also_print=True)

    with open(logger.log_file) as f:
        content = f.read()
        assert "Test Message" in content

    captured = capsys.readouterr()
    assert "Test Message" in captured.out

def test_logger_log_without_print_is_silent(temp_logger_env, capsys):
    logger = Logger("quiet_test")

    logger.log("Hidden")

    assert capsys.readouterr().out == ""
    with open(logger.log_file) as f:
        assert "Hidden" in f.read()
