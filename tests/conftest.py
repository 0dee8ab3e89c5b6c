"""
Pytest configuration and fixtures for HRC tests.
"""

import json
import tempfile
from pathlib import Path

import pytest

from hrc.config import LevelSpec, build_level_configs
from hrc.core.levels import LevelConfig


@pytest.fixture
def level_specs() -> list[LevelSpec]:
    """Chapter (captured number), section (numeric counter), item (letter counter)."""
    return [
        LevelSpec(pattern=r"# (\d+)\s*", item_type="Chapter", marker="*"),
        LevelSpec(pattern=r"## ", item_type="Section", mode="auto", counter_kind="numeric"),
        LevelSpec(pattern=r"### ", item_type="Item", mode="auto", counter_kind="alphaLower"),
    ]


@pytest.fixture
def outline_levels(level_specs: list[LevelSpec]) -> list[LevelConfig]:
    """Compiled three-level configuration."""
    return build_level_configs(level_specs)


@pytest.fixture
def sample_lines() -> list[str]:
    """A small outline document."""
    return [
        "# 1 Intro",
        "## Setup",
        "### first",
        "### second",
        "plain text",
        "## Usage",
        "### third",
        "# 2 Next",
        "## Again",
    ]


@pytest.fixture
def expected_output() -> list[str]:
    """``sample_lines`` rewritten with ``outline_levels``."""
    return [
        "Chapter * :1 Intro",
        "Section ** :1.1 Setup",
        "Item *** :1.1.a first",
        "Item *** :1.1.b second",
        "plain text",
        "Section ** :1.2 Usage",
        "Item *** :1.2.a third",
        "Chapter * :2 Next",
        "Section ** :2.1 Again",
    ]


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for file operations."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def levels_file(temp_dir: Path, level_specs: list[LevelSpec]) -> Path:
    """The three-level configuration written as a JSON level file."""
    path = temp_dir / "levels.json"
    path.write_text(
        json.dumps({"levels": [spec.to_dict() for spec in level_specs]}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_document(temp_dir: Path, sample_lines: list[str]) -> Path:
    """``sample_lines`` written as a UTF-8 markdown file."""
    path = temp_dir / "notes.md"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
