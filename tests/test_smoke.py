"""
Smoke tests to verify basic infrastructure setup.
Run these after fresh environment setup to confirm everything works.
"""

import sys
import importlib
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parent.parent


def test_python_version():
    """Test Python version meets requirements."""
    assert sys.version_info >= (3, 10), f"Python 3.10+ required, got {sys.version}"


def test_package_imports():
    """Test that configured packages can be imported."""
    packages = [
        "numpy",
        "pytest",
        "psutil",
    ]

    failed_imports = []
    for package in packages:
        try:
            importlib.import_module(package)
        except ImportError as e:
            failed_imports.append(f"{package}: {e}")

    if failed_imports:
        pytest.fail(f"Failed to import packages: {failed_imports}")


def test_project_structure():
    """Test that required directories exist."""
    missing_dirs = [name for name in ("termlife", "tests", "scripts") if not (ROOT / name).is_dir()]

    if missing_dirs:
        pytest.fail(f"Missing required directories: {missing_dirs}")


def test_source_package():
    """Test that termlife is importable as a package."""
    import termlife
    assert termlife.__version__ == "0.1.0"
    assert set(termlife.__all__) >= {"Grid", "BoundaryPolicy", "Cell"}


def test_env_file():
    """Test that .env.example documents the settings."""
    env_example = ROOT / ".env.example"
    assert env_example.exists(), ".env.example file missing"

    content = env_example.read_text()
    for name in ("TERMLIFE_WIDTH", "TERMLIFE_HEIGHT", "TERMLIFE_BOUNDARY", "TERMLIFE_FPS"):
        assert name in content, f"{name} not in .env.example"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
