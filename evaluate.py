#!/usr/bin/env python3
"""
Evaluate CLI - Name gut check

Evaluates one candidate name, or compares two, and prints a report.

Usage:
    python evaluate.py --name "Lantern Ridge"
    python evaluate.py --mode compare --name "Zoox" --name-b "Quaze Labs Solutions"
    python evaluate.py --name "Lantern Ridge" --json --output outputs/lantern_ridge.json

Output:
    Markdown report (default) or JSON on stdout, optionally saved to --output
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from gutcheck import NameEvaluator, MissingNameError, ConfigError, load_config
from gutcheck.links import build_next_step_links


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Structural gut check for one or two candidate names',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Single name
    python evaluate.py --name "Lantern Ridge"

    # Compare two names
    python evaluate.py --mode compare --name "Zoox" --name-b "Quaze Labs Solutions"

    # Custom vocabularies / thresholds
    python evaluate.py --name "Lantern Ridge" --config my_vocab.json

    # JSON output saved to a file
    python evaluate.py --name "Lantern Ridge" --json --output ./outputs/lantern.json
        """
    )

    parser.add_argument(
        '--mode',
        choices=['single', 'compare'],
        default='single',
        help='single (default) or compare'
    )
    parser.add_argument(
        '--name',
        help='Candidate name (option A in compare mode)'
    )
    parser.add_argument(
        '--name-b',
        help='Second candidate name (compare mode)'
    )
    parser.add_argument(
        '--config',
        help='Path to config JSON overriding vocabularies/thresholds (optional)'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print JSON instead of the markdown report'
    )
    parser.add_argument(
        '--output',
        help='Also write the output to this file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log detected signals and comparison decisions'
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    # Load config if provided
    if args.config:
        if not Path(args.config).exists():
            print(f"ERROR: Config not found: {args.config}")
            sys.exit(1)
        try:
            evaluator = NameEvaluator(load_config(args.config))
        except ConfigError as e:
            print(f"ERROR: {e}")
            sys.exit(1)
    else:
        evaluator = NameEvaluator()

    try:
        if args.mode == 'compare':
            report = evaluator.compare(args.name, args.name_b)
            data = report.to_dict()
            data['links'] = build_next_step_links(report.preferred_name)
            text = evaluator.generate_comparison_report(report)
        else:
            result = evaluator.evaluate(args.name)
            data = result.to_dict()
            data['links'] = build_next_step_links(result.name)
            text = evaluator.generate_report(result)
    except MissingNameError as e:
        flag = '--name-b' if e.field == 'name_b' else '--name'
        parser.error(f"{flag} is required and cannot be blank")

    if args.json:
        text = json.dumps(data, indent=2, ensure_ascii=False)

    print(text)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            f.write(text)
        print(f"Saved: {output_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
