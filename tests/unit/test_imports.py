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
        "handlers.transfer",
    ])
    def test_handler_import(self, module_name: str):
        """Each handler module should import and expose lambda_handler."""
        module = importlib.import_module(module_name)
        assert hasattr(module, "lambda_handler"), f"{module_name} missing lambda_handler"


class TestSupportImports:
    """Verify services, models and utils import without side effects."""

    @pytest.mark.parametrize("module_name", [
        "config.settings",
        "models.transfer",
        "services.ticket_selection",
        "services.transfer_service",
        "services.zpro_client",
        "utils.error_handling",
        "utils.logging_config",
        "utils.validators",
    ])
    def test_module_import(self, module_name: str):
        assert importlib.import_module(module_name) is not None

    def test_models_package_exports(self):
        import models

        assert models.TransferRequest is not None
        assert models.Ticket is not None
