"""
Tests for project metadata.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.mark.unit
class TestProjectMetadata:
    """Test pyproject.toml."""

    def test_readme_points_to_existing_project_file(self):
        with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
            project = tomllib.load(f)["project"]

        readme = project.get("readme")
        if readme is not None:
            path = readme if isinstance(readme, str) else readme["file"]
            assert (PROJECT_ROOT / path).is_file()
