"""Command line entry point: compile a style file to CSS."""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .compiler import StyleCompiler
from .config import AtomicCSSConfig, ShorthandStrategyName, load_config
from .utils.cache import cache_manager
from .utils.errors import AtomicCSSError, ValidationError, format_validation_errors
from .utils.logging_config import get_logger, setup_logging


def load_styles(path: str) -> Dict[str, Dict[str, Any]]:
    """Read a ``{owner: {rule: declarations}}`` style file (YAML or JSON)."""
    with open(path, "r") as f:
        styles = yaml.safe_load(f) or {}

    if not isinstance(styles, dict) or not all(isinstance(rules, dict) for rules in styles.values()):
        raise AtomicCSSError(
            f"Style file {path} must map owners to rule maps", details={"path": path}
        )
    return styles


def compile_styles(styles: Dict[str, Dict[str, Any]], config: AtomicCSSConfig) -> str:
    """Define every rule of every owner in file order and render the CSS.

    A rule given as a list of property names is compiled as a dynamic rule.
    """
    compiler = StyleCompiler(config)
    for owner, rules in styles.items():
        for name, declarations in rules.items():
            if isinstance(declarations, list):
                compiler.define_dynamic(owner, name, declarations)
            else:
                compiler.define_class(owner, name, declarations or {})
    return compiler.render_css()


def create_config(
    config_path: Optional[str] = None,
    use_layers: bool = False,
    strategy: Optional[str] = None,
) -> AtomicCSSConfig:
    """Load configuration and apply command line overrides."""
    config = load_config(config_path)
    if use_layers:
        config.css.use_css_layers = True
    if strategy:
        config.shorthand.strategy = ShorthandStrategyName(strategy)
    return config


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the compiler."""
    import argparse

    parser = argparse.ArgumentParser(description="Atomic CSS compiler")
    parser.add_argument("styles", type=str, help="Path to a YAML or JSON style file")
    parser.add_argument("--output", "-o", type=str, help="Write CSS to this file instead of stdout")
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")
    parser.add_argument("--layers", action="store_true", help="Group rules into @layer blocks")
    parser.add_argument(
        "--strategy",
        choices=[member.value for member in ShorthandStrategyName],
        help="Shorthand handling strategy",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level",
    )
    parser.add_argument("--version", action="version", version="0.1.0")

    args = parser.parse_args(argv)

    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level

    try:
        config = create_config(args.config, use_layers=args.layers, strategy=args.strategy)
        setup_logging(config.logging)
        cache_manager.resize_all(config.performance.cache_size)
    except ValueError as e:
        print(f"Failed to load configuration: {e}", file=sys.stderr)
        sys.exit(1)

    logger = get_logger("cli")

    try:
        css = compile_styles(load_styles(args.styles), config)
    except ValidationError as e:
        print(f"Failed to compile {args.styles}: {format_validation_errors([e])}", file=sys.stderr)
        sys.exit(1)
    except (AtomicCSSError, OSError, yaml.YAMLError) as e:
        print(f"Failed to compile {args.styles}: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(css)
        logger.info("CSS written", extra={"path": str(output), "css_length": len(css)})
    else:
        sys.stdout.write(css)


if __name__ == "__main__":
    main()
