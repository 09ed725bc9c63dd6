"""
Structure lint tests
Verify that every component follows the atomic component layout.
"""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent

COMPONENTS = ["fiscal_calendar", "inspection_numbering", "fiscal_reports"]
COMPONENT_FILES = ["__init__.py", "models.py", "ports.py", "_impl.py", "component.py"]


class TestProjectStructure:
    """Verify project structure follows component conventions."""

    def test_core_directories_exist(self) -> None:
        assert (PROJECT_ROOT / "src" / "components").is_dir()
        assert (PROJECT_ROOT / "src" / "adapters").is_dir()
        assert (PROJECT_ROOT / "src" / "api" / "routes").is_dir()
        assert (PROJECT_ROOT / "src" / "rules").is_dir()

    def test_runtime_files_exist(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()
        assert (PROJECT_ROOT / "migrations").is_dir()
        assert list((PROJECT_ROOT / "migrations").glob("*.sql"))

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "integration").is_dir()
        assert (PROJECT_ROOT / "tests" / "api").is_dir()

    @pytest.mark.parametrize("component", COMPONENTS)
    def test_component_layout(self, component: str) -> None:
        base = PROJECT_ROOT / "src" / "components" / component
        for filename in COMPONENT_FILES:
            assert (base / filename).is_file(), f"{component} is missing {filename}"
        assert (base / "tests" / "test_unit.py").is_file()

    @pytest.mark.parametrize("component", COMPONENTS)
    def test_component_exports_run(self, component: str) -> None:
        module = __import__(f"src.components.{component}", fromlist=["run", "__all__"])
        assert callable(module.run)
        assert "run" in module.__all__
