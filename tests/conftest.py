"""Pytest configuration and fixtures for atomic CSS compiler tests."""

import pytest
import tempfile
import os
from pathlib import Path
from typing import Generator

from atomic_css.compiler import StyleCompiler
from atomic_css.config import (
    AtomicCSSConfig,
    CSSConfig,
    ShorthandConfig,
    ShorthandStrategyName,
    ValidationConfig,
)
from atomic_css.manifest import Manifest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def test_config() -> AtomicCSSConfig:
    """Test configuration with unknown properties reported as errors."""
    return AtomicCSSConfig(
        validation=ValidationConfig(
            validate_properties=True,
            unknown_property_level="error",
            vendor_prefix_level="warn",
        )
    )


@pytest.fixture
def layered_config() -> AtomicCSSConfig:
    """Configuration rendering into @layer blocks."""
    return AtomicCSSConfig(css=CSSConfig(use_css_layers=True))


@pytest.fixture
def expand_config() -> AtomicCSSConfig:
    """Configuration using the expand_to_longhands strategy."""
    return AtomicCSSConfig(
        shorthand=ShorthandConfig(strategy=ShorthandStrategyName.EXPAND_TO_LONGHANDS)
    )


@pytest.fixture
def reject_config() -> AtomicCSSConfig:
    """Configuration using the reject_shorthands strategy."""
    return AtomicCSSConfig(
        shorthand=ShorthandConfig(strategy=ShorthandStrategyName.REJECT_SHORTHANDS)
    )


@pytest.fixture
def manifest() -> Manifest:
    """Empty manifest."""
    return Manifest()


@pytest.fixture
def compiler(test_config: AtomicCSSConfig, manifest: Manifest) -> StyleCompiler:
    """Fresh compiler writing into the manifest fixture."""
    return StyleCompiler(test_config, manifest=manifest)


@pytest.fixture
def sample_styles() -> str:
    """Sample style file content."""
    return """
button:
  base:
    color: red
    padding: 4
    margin_inline_start: 8
  hover:
    __include__: [base]
    color:
      default: red
      ":hover": blue
card:
  root:
    __include__:
      - [button, base]
    display: flex
"""


@pytest.fixture
def sample_styles_file(temp_dir: Path, sample_styles: str) -> Path:
    """Create a temporary style file with sample content."""
    styles_file = temp_dir / "styles.yaml"
    styles_file.write_text(sample_styles)
    return styles_file


# Environment setup
@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    # Disable logging during tests
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")
    for name in (
        "ATOMIC_CSS_USE_LAYERS",
        "ATOMIC_CSS_CLASS_PREFIX",
        "ATOMIC_CSS_SHORTHAND_STRATEGY",
        "ATOMIC_CSS_UNKNOWN_PROPERTY_LEVEL",
        "LOG_FILE",
        "CACHE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)

    yield
