"""
Pytest configuration and fixtures for fieldrules tests

This module provides shared fixtures for unit and integration tests.
"""
import pytest

from fieldrules.core.rules import Email, Length, NotBlank, PhoneNumber, RegExp, Type
from fieldrules.core.validation import ValidationExecutor


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for single rules and components"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run configuration files through the executor"
    )


# =======================
# EXECUTOR FIXTURES
# =======================

@pytest.fixture(scope="function")
def executor() -> ValidationExecutor:
    """
    Fresh executor for each test

    Returns:
        ValidationExecutor instance
    """
    return ValidationExecutor()


@pytest.fixture(scope="function")
def signup_rules() -> dict:
    """
    Rule set for a typical signup form

    Returns:
        Field name to rule list
    """
    return {
        "username": [NotBlank(), Length({"min": 3, "max": 20}), Type({"type": "alnum"})],
        "email": [NotBlank(), Email()],
        "phone": PhoneNumber(),
        "zip_code": RegExp({"regexp": "/^[0-9]{5}$/"}),
    }


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="function")
def rules_file(tmp_path):
    """
    Write a YAML rule set to a temporary file

    Returns:
        Path to the YAML file
    """
    path = tmp_path / "rules.yaml"
    path.write_text(
        """
rules:
  username:
    - type: not_blank
    - type: length
      params:
        min: 3
        max: 20
  email:
    - not_blank
    - type: email
      params:
        message: "{{ value }} is not an email address"
  contact:
    - type: at_least_one_of
      params:
        message: "Give an email address or a phone number"
      rules:
        - type: email
        - type: phone_number
  age:
    type: Type
    params:
      type: digit
"""
    )
    return path
