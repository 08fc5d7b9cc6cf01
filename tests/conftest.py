"""Test fixtures for the validation engine."""

import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from formvalidator.logic.rules import EMAIL, REQUIRED
from formvalidator.state.field_validator import FieldValidator


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def forms_dir():
    return PROJECT_ROOT / "forms"


@pytest.fixture
def email_field():
    return FieldValidator([REQUIRED, EMAIL], name="email")


@pytest.fixture
def required_field():
    return FieldValidator([REQUIRED], name="nickname")


@pytest.fixture
def sample_form_config():
    """A minimal valid form configuration."""
    return {
        "id": "test_form",
        "name": "Test Form",
        "description": "A test form",
        "fields": [
            {
                "name": "email",
                "label": "Email",
                "rules": ["required", "email"],
                "order": 1,
            },
            {
                "name": "name",
                "label": "Name",
                "rules": ["required", "name"],
                "order": 0,
            },
        ],
    }
