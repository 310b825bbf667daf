"""Main CLI entry point for localized-keys"""

import sys
import json
import argparse
from pathlib import Path
from typing import List, Optional, TextIO

from localized_keys.core.context import ConversionContext, ConversionOptions
from localized_keys.core.key_format import KeyFormat


def read_identifiers(stream: TextIO) -> List[str]:
    """Read case names, one per line

    Blank lines and lines starting with '#' are skipped.

    Args:
        stream: Text stream to read from

    Returns:
        Case names in file order
    """
    identifiers = []
    for line in stream:
        name = line.strip()
        if not name or name.startswith("#"):
            continue
        identifiers.append(name)
    return identifiers


def load_identifiers(input_file: Optional[Path]) -> List[str]:
    """Load case names from a file, or stdin when no file is given

    Args:
        input_file: Path to identifier list, None or '-' for stdin

    Returns:
        Case names in file order

    Raises:
        FileNotFoundError: If the input file does not exist
    """
    if input_file is None or str(input_file) == "-":
        return read_identifiers(sys.stdin)

    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}")

    with open(input_file, 'r', encoding='utf-8') as f:
        return read_identifiers(f)


def generate_keys(identifiers: List[str], options: ConversionOptions) -> ConversionContext:
    """Generate localization keys for a list of case names

    Args:
        identifiers: Case names in declaration order
        options: Conversion options

    Returns:
        Context holding the key table, diagnostics and logger
    """
    context = ConversionContext(options)
    context.add_identifiers(identifiers)
    return context


def render_text(context: ConversionContext) -> str:
    """Render the key table as 'identifier = KEY' lines"""
    return "\n".join(f"{identifier} = {key}" for identifier, key in context.key_table.entries())


def render_json(context: ConversionContext) -> str:
    """Render the key table and conflicts as JSON"""
    payload = {
        "keyFormat": context.key_format.value,
        "keys": {identifier: key for identifier, key in context.key_table.entries()},
        "conflicts": [
            {"key": record.key, "first": record.first, "second": record.second}
            for record in context.key_table.conflicts
        ],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='localized-keys',
        description='Generate localization keys from enum case names',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Upper snake case keys (default)
  localized-keys cases.txt

  # Camel case keys as JSON
  localized-keys cases.txt --key-format camelCase --json

  # Read case names from stdin, report conflicts as warnings
  printf 'a\\nA\\n' | localized-keys - --allow-conflicts
        """
    )

    parser.add_argument(
        'input', type=Path, nargs='?',
        help='File with one case name per line (default: stdin)'
    )
    parser.add_argument(
        '--key-format', '-f', default=KeyFormat.default().value,
        choices=[key_format.value for key_format in KeyFormat],
        help='Localization key format (default: upperSnakeCase)'
    )
    parser.add_argument(
        '--json', action='store_true',
        help='Print keys and conflicts as JSON'
    )
    parser.add_argument(
        '--allow-conflicts', action='store_true',
        help='Report key conflicts as warnings instead of errors'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Print a conversion summary to stderr'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point

    Returns:
        Exit status (0 on success, 1 on errors or key conflicts)
    """
    args = build_parser().parse_args(argv)

    options = ConversionOptions(
        key_format=KeyFormat.from_name(args.key_format),
        allow_conflicts=args.allow_conflicts,
        output_format='json' if args.json else 'text',
        verbose=args.verbose,
    )

    try:
        identifiers = load_identifiers(args.input)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    context = generate_keys(identifiers, options)

    output = render_json(context) if options.output_format == 'json' else render_text(context)
    if output:
        print(output)

    for diagnostic in context.diagnostics:
        print(diagnostic.format(), file=sys.stderr)

    if options.verbose:
        print(context.logger.print_summary(), file=sys.stderr)

    return 1 if context.has_errors() else 0


if __name__ == "__main__":
    sys.exit(main())
