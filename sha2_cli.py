"""Command-line front end for `sha2`.

Usage:
    python sha2_cli.py "message"
    python sha2_cli.py -a sha512 "message"
    python sha2_cli.py -f path/to/file
    python sha2_cli.py --format yaml --trace "message"

Without `-f`, the single argument is interpreted as a UTF-8 string and
hashed. With `-f`, the file's raw bytes are hashed.

Output formats:
    hex    the hex digest (default)
    words  the 8 digest words, one per line
    yaml   a mapping with the digest and, with --trace, the chaining value
           after every block
"""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List

import yaml

from sha2 import digest_bytes, hash_with_state_tracking
from variants import VARIANTS, Sha2Variant, get_variant


def _format_word(word: int, variant: Sha2Variant) -> str:
    return f"0x{word:0{variant.word_bytes * 2}x}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute SHA-256 / SHA-512 digests with the pure-Python engine"
    )
    parser.add_argument(
        "message",
        nargs="?",
        help="Message to hash (UTF-8 encoded)",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=str,
        default=None,
        help="Hash the raw bytes of this file instead of a message argument",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        type=str,
        choices=sorted(VARIANTS),
        default="sha256",
        help="Hash algorithm (default: sha256)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["hex", "words", "yaml"],
        default="hex",
        help="Output format (default: hex)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Include the chaining value after every block (requires --format yaml)",
    )
    return parser


def _report(data: bytes, variant: Sha2Variant, trace: bool) -> Dict:
    """Collect the digest (and optionally per-block states) into a dict."""
    words, states = hash_with_state_tracking(data, variant)
    report: Dict = {
        "algorithm": variant.name,
        "message_length_bytes": len(data),
        "digest_hex": digest_bytes(words, variant).hex(),
        "digest_words": [_format_word(w, variant) for w in words],
    }
    if trace:
        chaining: List[Dict] = []
        for block_idx, state in enumerate(states[1:]):
            chaining.append({
                "block_index": block_idx,
                "state": [_format_word(w, variant) for w in state],
            })
        report["chaining_values"] = chaining
    return report


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = _build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(argv)

    variant = get_variant(args.algorithm)

    if args.trace and args.format != "yaml":
        sys.stderr.write("--trace is only available with --format yaml\n")
        return 1

    if args.file is not None:
        if args.message is not None:
            sys.stderr.write("Give either a message or -f path/to/file, not both\n")
            return 1
        try:
            with open(args.file, "rb") as f:
                data = f.read()
        except OSError as e:
            sys.stderr.write(f"Error reading file '{args.file}': {e}\n")
            return 1
    elif args.message is not None:
        data = args.message.encode("utf-8")
    else:
        parser.print_usage(sys.stderr)
        return 1

    report = _report(data, variant, args.trace)

    if args.format == "yaml":
        print(yaml.safe_dump(report, default_flow_style=False, sort_keys=False), end="")
    elif args.format == "words":
        for word in report["digest_words"]:
            print(word)
    else:
        print(report["digest_hex"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
