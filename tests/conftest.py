"""
Pytest configuration and fixtures for moresettings tests

This module provides shared fixtures for unit and integration tests.
"""
import os
import textwrap

import pytest

from moresettings.core.rules import FormModel


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that exercise a single component"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the command-line tools end to end"
    )


# =======================
# SUBJECT FIXTURES
# =======================

@pytest.fixture
def make_subject():
    """
    Factory for form models used as validation subjects

    Returns:
        Callable building a FormModel from keyword attributes
    """
    def _make(labels=None, rules=None, subject_id=None, **attributes):
        return FormModel(attributes=attributes, labels=labels, rules=rules, subject_id=subject_id)

    return _make


@pytest.fixture
def order_labels() -> dict:
    return {"quantity": "Quantity", "price": "Unit price", "stock": "Stock"}


# =======================
# SETTINGS FIXTURES
# =======================

@pytest.fixture
def sample_settings() -> list[dict]:
    """
    A small settings collection, deliberately out of id order

    Returns:
        List of setting dictionaries
    """
    return [
        {"id": 3, "name": "mail_host", "title": "Mail server host", "status": 1, "cat_id": 2, "type": 1},
        {"id": 1, "name": "site_title", "title": "Site title", "status": 1, "cat_id": 1, "type": 1},
        {"id": 4, "name": "mail_port", "title": "Mail server port", "status": 0, "cat_id": 2, "type": 2},
        {"id": 2, "name": "site_logo", "title": "Logo", "status": 1, "cat_id": 1, "type": 3},
        {"id": 5, "name": "maintenance", "title": "Maintenance mode", "status": 0, "cat_id": 3, "type": 4},
    ]


@pytest.fixture
def many_settings() -> list[dict]:
    """120 settings, enough for three pages of 50"""
    return [
        {"id": i, "name": f"setting_{i}", "title": f"Setting {i}", "status": i % 2, "cat_id": i % 3}
        for i in range(1, 121)
    ]


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def bounds_module(tmp_path, monkeypatch) -> str:
    """
    Write an importable module holding a deferred bound function

    Returns:
        The module name; "<name>:max_from_stock" reads the stock field
    """
    module_name = "order_bounds"
    (tmp_path / f"{module_name}.py").write_text(textwrap.dedent("""
        def max_from_stock(subject, field_name):
            return subject.get_value("stock")

        NOT_CALLABLE = 10
    """))
    monkeypatch.syspath_prepend(str(tmp_path))
    return module_name


@pytest.fixture
def rules_file(tmp_path, bounds_module):
    """
    Write a YAML rules file for an order form

    Returns:
        Path to the rules file
    """
    path = tmp_path / "order_rules.yaml"
    path.write_text(textwrap.dedent(f"""
        rules:
          quantity:
            - type: integer
              params:
                min: 1
                max:
                  ref: "{bounds_module}:max_from_stock"
          price:
            - type: number
              params:
                min: 0.01
                too_small: "{{attribute}} cannot be free."
          discount:
            - type: number
              severity: warning
              params:
                max: 50
          stock:
            - type: safe
    """))
    return path


# =======================
# CONFIGURATION FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_env_vars():
    """
    Set test environment variables

    This fixture loads tests/fixtures/test.env and sets environment variables
    """
    from dotenv import load_dotenv

    env_path = os.path.join(os.path.dirname(__file__), "fixtures", "test.env")

    if os.path.exists(env_path):
        load_dotenv(env_path, override=True)
