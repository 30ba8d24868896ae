"""Tests for the command line entry point."""

import logging
from pathlib import Path

import pytest

from atomic_css.cli import compile_styles, create_config, load_styles, main
from atomic_css.config import AtomicCSSConfig, ShorthandStrategyName
from atomic_css.utils.cache import hash_cache
from atomic_css.utils.errors import AtomicCSSError


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the logging setup done by main()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoadStyles:
    """Test reading style files."""

    def test_load(self, sample_styles_file: Path):
        """Test owners and rules are read in file order."""
        styles = load_styles(str(sample_styles_file))

        assert list(styles) == ["button", "card"]
        assert list(styles["button"]) == ["base", "hover"]

    def test_json(self, temp_dir: Path):
        """Test JSON style files are accepted."""
        path = temp_dir / "styles.json"
        path.write_text('{"a": {"b": {"color": "red"}}}')

        assert load_styles(str(path)) == {"a": {"b": {"color": "red"}}}

    def test_invalid_shape(self, temp_dir: Path):
        """Test files that are not owner maps are rejected."""
        path = temp_dir / "styles.yaml"
        path.write_text("- color: red\n")

        with pytest.raises(AtomicCSSError, match="must map owners to rule maps"):
            load_styles(str(path))


class TestCompileStyles:
    """Test compiling loaded styles."""

    def test_compile(self, sample_styles_file: Path):
        """Test includes across owners resolve in file order."""
        css = compile_styles(load_styles(str(sample_styles_file)), AtomicCSSConfig())

        assert "{display:flex}" in css
        assert ":hover{color:blue}" in css
        assert "{padding:4px}" in css

    def test_dynamic_rule(self):
        """Test list values compile as dynamic rules."""
        css = compile_styles({"box": {"sized": ["width"]}}, AtomicCSSConfig())

        assert "{width:var(--x-width)}" in css

    def test_create_config_overrides(self):
        """Test command line overrides are applied."""
        config = create_config(use_layers=True, strategy="expand_to_longhands")

        assert config.css.use_css_layers
        assert config.shorthand.strategy == ShorthandStrategyName.EXPAND_TO_LONGHANDS


class TestMain:
    """Test the entry point end to end."""

    def test_stdout(self, sample_styles_file: Path, capsys):
        """Test CSS is written to stdout by default."""
        main([str(sample_styles_file)])

        out = capsys.readouterr().out
        assert "{display:flex}" in out
        assert ":hover{color:blue}" in out

    def test_output_file(self, sample_styles_file: Path, temp_dir: Path, capsys):
        """Test --output writes the stylesheet to a file."""
        output = temp_dir / "dist" / "styles.css"

        main([str(sample_styles_file), "-o", str(output)])

        assert "{display:flex}" in output.read_text()
        assert capsys.readouterr().out == ""

    def test_layers(self, sample_styles_file: Path, capsys):
        """Test --layers groups rules into layers."""
        main([str(sample_styles_file), "--layers"])

        assert capsys.readouterr().out.startswith("@layer priority1")

    def test_reject_strategy(self, temp_dir: Path, capsys):
        """Test disallowed shorthands exit with an error."""
        path = temp_dir / "styles.yaml"
        path.write_text("a:\n  b:\n    border: 1px solid red\n")

        with pytest.raises(SystemExit) as exc_info:
            main([str(path), "--strategy", "reject_shorthands"])

        assert exc_info.value.code == 1
        assert "Property: border" in capsys.readouterr().err

    def test_missing_include(self, temp_dir: Path, capsys):
        """Test unresolved includes exit with an error."""
        path = temp_dir / "styles.yaml"
        path.write_text("a:\n  b:\n    __include__: missing\n    color: red\n")

        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])

        assert exc_info.value.code == 1
        assert "Included rule 'missing' not found in 'a'" in capsys.readouterr().err

    def test_missing_file(self, temp_dir: Path, capsys):
        """Test a missing style file exits with an error."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(temp_dir / "missing.yaml")])

        assert exc_info.value.code == 1
        assert "Failed to compile" in capsys.readouterr().err

    def test_cache_size_applied(self, sample_styles_file: Path, temp_dir: Path, capsys):
        """Test the configured cache size is applied to the hash cache."""
        config_file = temp_dir / "atomic-css.yaml"
        config_file.write_text("performance:\n  cache_size: 64\n")
        before = hash_cache.max_size

        try:
            main([str(sample_styles_file), "--config", str(config_file)])
            assert hash_cache.max_size == 64
        finally:
            hash_cache.resize(before)

    def test_version(self, capsys):
        """Test --version prints the version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert "0.1.0" in capsys.readouterr().out
