"""
Import validation tests.

These tests ensure all modules can be imported successfully, catching
issues like missing dependencies or circular imports BEFORE deployment.

Run with: pytest tests/unit/test_imports.py -v
"""

import importlib

import pytest


class TestHandlerImports:
    """Verify all handler modules can be imported without errors."""

    @pytest.mark.parametrize("module_name", [
        "handlers.main",
        "handlers.health_check",
        "handlers.status_page",
    ])
    def test_handler_import(self, module_name: str):
        """Each handler module should import without errors."""
        try:
            module = importlib.import_module(module_name)
            assert hasattr(module, "lambda_handler"), f"{module_name} missing lambda_handler"
        except ImportError as e:
            pytest.fail(f"Failed to import {module_name}: {e}")


class TestServiceImports:
    """Verify all service modules can be imported."""

    @pytest.mark.parametrize("module_name", [
        "services.health_orchestrator",
        "services.probes",
        "services.secret_service",
        "services.database_service",
        "services.dns_service",
        "repositories.postgres_repo",
        "rendering.status_page",
    ])
    def test_service_import(self, module_name: str):
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            pytest.fail(f"Failed to import {module_name}: {e}")


def test_templates_ship_with_renderer():
    from rendering.status_page import TEMPLATE_DIR

    for name in ("base.html", "status.html", "error.html"):
        assert (TEMPLATE_DIR / name).is_file()
