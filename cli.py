#!/usr/bin/env python3
"""
Gear Ratio Scanner CLI

A tool for reading an engineering schematic and summing the gear ratios of
every '*' that touches exactly two part numbers.
"""

import argparse
import logging
import sys
from pathlib import Path

from schematic.errors import SchematicError
from scanner.config import load_config, merge_config, LOG_LEVELS, OUTPUT_FORMATS
from scanner.gears import scan_schematic
from scanner.loader import load_schematic
from exporters import to_text, to_json
from logging_config import setup_logging

# Named explicitly so records are kept when run as a script (__main__)
logger = logging.getLogger("cli")


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="gearsum",
        description="Sum the gear ratios of an engineering schematic.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gearsum                            # Scan input.txt, text output
  gearsum schematic.txt -f json      # JSON output with every gear
  gearsum -c gearsum.yaml            # Read options from a config file
  gearsum input.txt -o result.txt    # Write output to a file
  gearsum --log-level DEBUG          # Log every gear found to stderr
        """,
    )

    # Positional arguments
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Schematic file to scan (default: input.txt)",
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Configuration file (YAML, JSON or TOML)",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=sorted(OUTPUT_FORMATS),
        default=None,
        help="Output format (default: text)",
    )

    # Logging options
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        default=None,
        help="Logging level for messages on stderr (default: WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log messages to this file",
    )

    return parser.parse_args(args)


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    # Resolve configuration
    try:
        file_config = load_config(parsed.config) if parsed.config else {}
    except SchematicError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = merge_config(file_config, {
        "input": parsed.input,
        "format": parsed.format,
        "output": parsed.output,
        "log_level": parsed.log_level,
        "log_file": parsed.log_file,
    })

    try:
        setup_logging(config["log_level"], config["log_file"])
    except OSError as e:
        print(f"Error opening log file: {e}", file=sys.stderr)
        return 1

    input_path = Path(config["input"])
    if not input_path.is_file():
        print(f"Error: '{input_path}' is not a file", file=sys.stderr)
        return 1

    # Scan the schematic
    try:
        schematic = load_schematic(input_path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading schematic: {e}", file=sys.stderr)
        return 1
    except SchematicError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = scan_schematic(schematic)

    # Generate output
    if config["format"] == "json":
        output = to_json(result)
    else:  # text (default)
        output = to_text(result)

    # Write output
    if config["output"]:
        try:
            output_path = Path(config["output"])
            output_path.write_text(output + "\n", encoding="utf-8")
            logger.info("Output written to: %s", output_path)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
