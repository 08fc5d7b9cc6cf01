"""Tests for the validate_form command-line script."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "validate_form.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("validate_form", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


VALID_ARGS = [
    "signup",
    "name=Ada",
    "phone=6155551234",
    "zip_code=37201",
    "email=ada@example.com",
    "password=hunter2hunter2",
]


def test_valid_submission(script, capsys):
    assert script.main(VALID_ARGS) == 0
    out = capsys.readouterr().out
    assert "Form submitted successfully!" in out
    assert "Personal Information:" in out


def test_invalid_submission(script, capsys):
    assert script.main(["signup", "email=not-an-email"]) == 1
    out = capsys.readouterr().out
    assert "Invalid email address" in out
    assert "Form validation failed." in out


def test_missing_form_id_exits_with_usage(script, capsys):
    with pytest.raises(SystemExit) as exc:
        script.main([])
    assert exc.value.code == 2
    assert "form_id" in capsys.readouterr().err


def test_form_without_values_is_invalid(script, capsys):
    assert script.main(["signup"]) == 1
    assert "This field is required" in capsys.readouterr().out


def test_usage_errors(script, capsys):
    assert script.main(["no_such_form"]) == 2
    assert script.main(["signup", "missing-equals"]) == 2
    assert script.main(["signup", "unknown=1"]) == 2


def test_parse_assignments_keeps_extra_equals(script):
    assert script.parse_assignments(["password=a=b"]) == {"password": "a=b"}
