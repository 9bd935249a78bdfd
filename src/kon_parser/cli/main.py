"""Main CLI entry point for the ``kon`` command-line tool.

Provides parsing, validation and token dumping for KON documents.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from kon_parser import __version__
from kon_parser.api import KonParser
from kon_parser.shared.config import ParserConfig
from kon_parser.shared.errors import ConfigError, KonParseError
from kon_parser.shared.logging import configure_logging, get_logger

KON_SUFFIX = ".kon"
OUTPUT_FORMATS = ["json", "text", "summary"]
EXIT_INTERRUPTED = 130


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self) -> None:
        self.parser_config = ParserConfig()
        self.output_format = "json"

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load CLI configuration from a JSON file.

        Recognised keys are ``output_format`` plus any :class:`ParserConfig`
        field. A missing or unreadable file leaves the defaults in place.
        """
        config = cls()
        if not config_path.exists():
            return config

        try:
            with config_path.open() as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ConfigError("configuration file must hold a JSON object")
            config.output_format = data.pop("output_format", config.output_format)
            config.parser_config = ParserConfig.from_dict(data)
        except (OSError, ValueError, ConfigError) as e:
            print(f"Warning: Could not load config file: {e}", file=sys.stderr)

        return config


class KonProcessor:
    """Core KON processing logic for CLI operations."""

    def __init__(self, config: CLIConfig) -> None:
        self.config = config
        self.parser = KonParser(config.parser_config)
        self.logger = get_logger(__name__, None, "cli_processor")

    def process_single_file(self, file_path: Path) -> Dict[str, Any]:
        """Parse a single file and return a JSON-friendly report."""
        try:
            source = self.parser.read_source(file_path)
            result = self.parser.parse_with_statistics(source)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning("Failed to read file", extra={"file": str(file_path)})
            return {"file": str(file_path), "success": False, "error": str(e)}
        except KonParseError as e:
            return {
                "file": str(file_path),
                "success": False,
                "error": str(e),
                "error_type": type(e).__name__,
            }

        return {
            "file": str(file_path),
            "success": True,
            "elements": [element.to_dict() for element in result.elements],
            "display": [str(element) for element in result.elements],
            "statistics": result.statistics.to_dict(),
        }

    def find_kon_files(self, path: Path, recursive: bool = True) -> Iterator[Path]:
        """Find KON files in path; an explicit file is always included."""
        if path.is_dir():
            pattern = f"**/*{KON_SUFFIX}" if recursive else f"*{KON_SUFFIX}"
            for kon_file in sorted(path.glob(pattern)):
                if kon_file.is_file():
                    yield kon_file
        else:
            yield path

    def batch_process(self, paths: List[Path], recursive: bool = True) -> List[Dict[str, Any]]:
        """Process every file reachable from ``paths`` in order."""
        results = []
        for path in paths:
            for file_path in self.find_kon_files(path, recursive):
                results.append(self.process_single_file(file_path))
        return results


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="kon",
        description="Parse and validate KON configuration documents"
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse KON files")
    parse_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="KON files or directories to parse"
    )
    parse_parser.add_argument(
        "--format", "-f",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: json)"
    )
    parse_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )
    parse_parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file (JSON)"
    )
    parse_parser.add_argument(
        "--max-depth",
        type=int,
        help="Maximum nesting depth of child blocks"
    )
    parse_parser.add_argument(
        "--no-recursive",
        dest="recursive",
        action="store_false",
        help="Only look at the top level of directories"
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check that KON files parse")
    validate_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="KON files or directories to validate"
    )
    validate_parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format"
    )

    # Tokens command
    tokens_parser = subparsers.add_parser("tokens", help="Print the token stream of a file")
    tokens_parser.add_argument("path", type=Path, help="KON file")

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def format_results(results: List[Dict[str, Any]], format_type: str) -> str:
    """Format processing results for output."""
    if format_type == "text":
        lines = []
        for result in results:
            if result["success"]:
                lines.append(f"# {result['file']}")
                lines.extend(result["display"])
            else:
                lines.append(f"# {result['file']}: error: {result['error']}")
        return "\n".join(lines)

    if format_type == "summary":
        if not results:
            return "No results to display."

        successful = sum(1 for r in results if r["success"])
        lines = [f"Processed {len(results)} files, {successful} successful"]
        lines.append("-" * 60)
        for result in results:
            status = "✓" if result["success"] else "✗"
            lines.append(f"{status} {result['file']}")
            if result["success"]:
                stats = result["statistics"]
                lines.append(
                    f"   Elements: {stats['element_count']}, "
                    f"Tokens: {stats['token_count']}, "
                    f"Depth: {stats['max_depth']}, "
                    f"Time: {stats['processing_time_ms']:.1f}ms"
                )
            else:
                lines.append(f"   Error: {result['error']}")
        return "\n".join(lines)

    return json.dumps(
        [{k: v for k, v in r.items() if k != "display"} for r in results],
        indent=2
    )


def cmd_parse(args: argparse.Namespace) -> int:
    """Handle parse command."""
    config = CLIConfig()
    if args.config:
        config = CLIConfig.from_file(args.config)

    if args.max_depth is not None:
        try:
            config.parser_config = config.parser_config.override(max_depth=args.max_depth)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    output_format = args.format or config.output_format
    if output_format not in OUTPUT_FORMATS:
        output_format = "json"

    processor = KonProcessor(config)
    results = processor.batch_process(args.paths, args.recursive)
    formatted_output = format_results(results, output_format)

    if args.output:
        try:
            args.output.write_text(formatted_output)
            print(f"Results written to {args.output}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(formatted_output)

    if not results:
        return 1
    return 0 if all(r["success"] for r in results) else 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle validate command."""
    processor = KonProcessor(CLIConfig())
    results = []
    for result in processor.batch_process(args.paths):
        entry = {"file": result["file"], "valid": result["success"]}
        if not result["success"]:
            entry["error"] = result["error"]
        results.append(entry)

    if args.format == "json":
        print(json.dumps(results, indent=2))
    else:
        valid_count = sum(1 for r in results if r["valid"])
        print(f"Validated {len(results)} files, {valid_count} valid")
        print("-" * 50)
        for result in results:
            status = "✓" if result["valid"] else "✗"
            print(f"{status} {result['file']}")
            if not result["valid"]:
                print(f"   Error: {result['error']}")

    return 0 if results and all(r["valid"] for r in results) else 1


def cmd_tokens(args: argparse.Namespace) -> int:
    """Handle tokens command."""
    parser = KonParser()
    try:
        tokens = parser.tokenize(parser.read_source(args.path))
    except (OSError, UnicodeDecodeError, KonParseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for token in tokens:
        print(repr(token))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        configure_logging(logging.DEBUG)
    elif args.quiet:
        configure_logging(logging.ERROR)

    try:
        if args.command == "parse":
            return cmd_parse(args)
        if args.command == "validate":
            return cmd_validate(args)
        return cmd_tokens(args)

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
