# Copyright 2025 LogManager Contributors
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# This file was created or modified with the assistance of an AI (Large Language Model).
# Review required for correctness, security, and licensing.

"""
Test suite for validating installation requirements and user-facing setup.

This test suite ensures that the packaging metadata and README match the
code, so the package can be installed and used as documented.
"""

import importlib
import sys
import tomllib
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))


@pytest.fixture(scope="module")
def pyproject():
    with open(REPO_ROOT / "pyproject.toml", "rb") as handle:
        return tomllib.load(handle)


class TestInstallationPrerequisites:
    """Test that installation prerequisites are met and documented."""

    def test_python_version_compatibility(self):
        """Verify Python version is 3.11 or higher."""
        version_info = sys.version_info
        assert version_info >= (
            3,
            11,
        ), f"Python 3.11+ required, found {version_info.major}.{version_info.minor}"

    def test_pyproject_declares_runtime_dependencies(self, pyproject):
        """Verify Flask and Werkzeug are declared for the integration."""
        dependencies = " ".join(pyproject["project"]["dependencies"])
        assert "Flask" in dependencies
        assert "Werkzeug" in dependencies

    def test_pyproject_declares_test_extra(self, pyproject):
        """Verify pytest is available through the test extra."""
        extras = pyproject["project"]["optional-dependencies"]
        assert any(dep.startswith("pytest") for dep in extras["test"])

    def test_readme_exists(self):
        """Verify README.md documents installation."""
        readme = REPO_ROOT / "README.md"
        assert readme.exists(), "README.md not found"
        assert "pip install" in readme.read_text(encoding="utf-8")


class TestPackageLayout:
    """Test that the documented modules import cleanly."""

    @pytest.mark.parametrize(
        "module_name",
        [
            "log_manager",
            "log_manager.config",
            "log_manager.decorators",
            "log_manager.flask_integration",
            "log_manager.logging_config",
        ],
    )
    def test_module_imports(self, module_name):
        """Verify each public module can be imported."""
        assert importlib.import_module(module_name) is not None

    def test_public_api_exports(self):
        """Verify the README examples only use exported names."""
        package = importlib.import_module("log_manager")
        for name in ("LogManager", "ExceptionDetails", "setup_logging"):
            assert name in package.__all__
