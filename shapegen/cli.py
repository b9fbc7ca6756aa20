# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Provides command-line interface to profile samples and
#   generate look-alike data.
#
# COMMANDS:
# ---------
# 1. Generate strings from a CSV column (or one sample per line):
#    python -m shapegen.cli generate --file names.csv --column lastname --count 10
#    python -m shapegen.cli generate --file dates.txt --count 5 --seed 42
#
# 2. Show the pattern rank table:
#    python -m shapegen.cli patterns --file names.csv --column 0 --top 5
#
# 3. Profile samples fetched over HTTP:
#    python -m shapegen.cli stream --url http://127.0.0.1:8000/samples --fetch 200
#
# EXIT STATUS:
# ------------
#   0 on success, 1 on profiling / file / HTTP errors.
#
# ==============================================

import argparse
import random
import sys
from dataclasses import replace
from typing import List, Optional

import requests

from shapegen.config import get_config
from shapegen.errors import ProfileError
from shapegen.generator import SampleGenerator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapegen",
        description="Profile sample strings and generate look-alike data"
    )
    parser.add_argument("--quiet", action="store_true", help="Only print results")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_profile_options(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--partitions", type=int, default=None, help="Number of fact partitions")
        sub.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")

    def add_file_options(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--file", required=True, help="CSV file, or text file with one sample per line")
        sub.add_argument("--column", default=None, help="CSV column name or 0-based index")

    generate = subparsers.add_parser("generate", help="Generate strings from file samples")
    add_file_options(generate)
    add_profile_options(generate)
    generate.add_argument("--count", type=int, default=10, help="How many strings to generate")

    patterns = subparsers.add_parser("patterns", help="Show the pattern rank table")
    add_file_options(patterns)
    add_profile_options(patterns)
    patterns.add_argument("--top", type=int, default=10, help="How many patterns to show")

    stream = subparsers.add_parser("stream", help="Profile samples fetched over HTTP")
    stream.add_argument("--url", default=None, help="Sample endpoint (default from config)")
    stream.add_argument("--fetch", type=int, default=100, help="How many samples to fetch")
    stream.add_argument("--count", type=int, default=10, help="How many strings to generate")
    add_profile_options(stream)

    return parser


def _make_generator(args: argparse.Namespace) -> SampleGenerator:
    config = get_config()
    profile_config = config.profile
    if args.partitions is not None:
        profile_config = replace(profile_config, partition_count=args.partitions)
    config = replace(config, profile=profile_config, verbose=config.verbose and not args.quiet)

    seed = args.seed if args.seed is not None else profile_config.random_seed
    return SampleGenerator(config=config, rng=random.Random(seed))


def _ingest_file(generator: SampleGenerator, args: argparse.Namespace) -> None:
    if args.column is None:
        generator.ingest_lines(args.file)
    else:
        generator.ingest_csv_column(args.file, args.column)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        generator = _make_generator(args)

        if args.command == "generate":
            _ingest_file(generator, args)
            for value in generator.generate(args.count):
                print(value)

        elif args.command == "patterns":
            _ingest_file(generator, args)
            summary = generator.get_pattern_summary(top=args.top)
            for row in summary["patterns"]:
                print(f"{row['pattern']}\t{row['percentage']:.4f}\t{row['cumulative']:.4f}")

        elif args.command == "stream":
            generator.ingest_from_url(args.url, count=args.fetch)
            for value in generator.generate(args.count):
                print(value)

    except requests.RequestException as e:
        print(f"✗ HTTP error: {e}", file=sys.stderr)
        return 1
    except (ProfileError, ValueError, KeyError, OSError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
