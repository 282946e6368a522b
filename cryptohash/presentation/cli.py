import argparse
import logging
import sys
from typing import List, Optional

from ..domain.errors import HashValueError
from ..infrastructure.container import ContainerConfig
from ..infrastructure.di import AppInjector

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

def run_hash(injector: AppInjector, args: argparse.Namespace) -> int:
    container = injector.get_container()
    use_case = container.compute_hash_use_case

    exit_code = EXIT_OK
    for path in args.paths:
        if path == "-":
            result = use_case.execute_stream(
                sys.stdin.buffer, algorithm=args.algorithm, source="-"
            )
        else:
            result = use_case.execute_file(path, algorithm=args.algorithm)

        if not result.success:
            print(f"{path}: {result.error}", file=sys.stderr)
            exit_code = EXIT_FAILURE
            continue

        print(f"{container.render(result.hash_value)}  {path}")

    return exit_code

def run_verify(injector: AppInjector, args: argparse.Namespace) -> int:
    use_case = injector.get_container().verify_hash_use_case

    if args.path == "-":
        result = use_case.execute_bytes(
            sys.stdin.buffer.read(), args.expected, args.algorithm, source="-"
        )
    else:
        result = use_case.execute_file(args.path, args.expected, args.algorithm)

    if not result.success:
        print(f"{args.path}: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    if result.matches:
        print(f"{args.path}: OK ({result.algorithm})")
        return EXIT_OK

    print(f"{args.path}: FAILED ({', '.join(result.candidates)})")
    return EXIT_FAILURE

def run_format(injector: AppInjector, args: argparse.Namespace) -> int:
    container = injector.get_container()
    provider = container.digest_provider

    try:
        if args.algorithm:
            descriptors = [provider.get(args.algorithm)]
        else:
            descriptors = provider.candidates_for(args.hash_code)[:1]

        if not descriptors:
            print(
                f"{args.hash_code}: not a hash code of any available digest",
                file=sys.stderr,
            )
            return EXIT_FAILURE

        hash_value = descriptors[0].from_string(args.hash_code)
    except HashValueError as err:
        print(f"{args.hash_code}: {err}", file=sys.stderr)
        return EXIT_FAILURE

    print(container.render(hash_value))
    return EXIT_OK

def run_list(injector: AppInjector, args: argparse.Namespace) -> int:
    provider = injector.get_container().digest_provider

    for name in provider.algorithms():
        descriptor = provider.get(name)
        print(f"{name:<12}{descriptor.byte_length * 8:>5} bits")

    return EXIT_OK

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cryptohash",
        description="cryptohash - fixed-size hash values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cryptohash hash README.md                  # SHA-256 of a file
  cryptohash hash -a md5 -f D README.md      # dash grouped MD5
  cryptohash verify README.md ed07-6287-...  # algorithm inferred from length
  cryptohash format ED076287532E86365E841E92BFC50D8C -f D
  cryptohash list
        """
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Log level (default: warning)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    hash_parser = subparsers.add_parser("hash", help="Hash files")
    hash_parser.add_argument("paths", nargs="+", help="Files to hash, '-' for stdin")

    verify_parser = subparsers.add_parser(
        "verify", help="Verify a file against a hash code"
    )
    verify_parser.add_argument("path", help="File to verify, '-' for stdin")
    verify_parser.add_argument("expected", help="Expected hash code")

    format_parser = subparsers.add_parser(
        "format", help="Validate and reformat a hash code"
    )
    format_parser.add_argument("hash_code", help="Hash code to format")

    subparsers.add_parser("list", help="List available digest algorithms")

    for sub in (hash_parser, verify_parser, format_parser):
        sub.add_argument(
            "-a", "--algorithm",
            type=str,
            default=None,
            help="Digest algorithm (default: sha256, inferred for verify/format)"
        )

    for sub in (hash_parser, format_parser):
        sub.add_argument(
            "-f", "--format",
            type=str,
            choices=["H", "D", "h", "d"],
            default="H",
            help="Output format: 'H' plain hex, 'D' dash grouped (default: H)"
        )
        sub.add_argument(
            "-u", "--uppercase",
            action="store_true",
            help="Print hex digits in upper case"
        )

    return parser

COMMANDS = {
    "hash": run_hash,
    "verify": run_verify,
    "format": run_format,
    "list": run_list,
}

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    config = ContainerConfig.from_options(
        algorithm=getattr(args, "algorithm", None) if args.command == "hash" else None,
        format_spec=getattr(args, "format", None),
        uppercase=getattr(args, "uppercase", False),
    )

    injector = AppInjector(config=config)
    try:
        return COMMANDS[args.command](injector, args)
    finally:
        injector.close()
