"""Command-line entry point: decode a BEJ file into JSON."""

from __future__ import annotations

import sys
from typing import Sequence

from .parser import bej_parse

__all__ = ["main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the decoder; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    args = list(argv)
    if len(args) != 3:
        print(
            "Usage: bejdecode <bej_filepath> <dictionary_filepath> <json_filepath>",
            file=sys.stderr,
        )
        return 1

    bej_path, dictionary_path, json_path = args
    print("starting BEJ parsing...")
    print(f"BEJ file: {bej_path}")
    print(f"dictionary: {dictionary_path}")
    print(f"output JSON: {json_path}")

    try:
        bej_parse(bej_path, dictionary_path, json_path)
    except OSError as exc:
        print(exc, file=sys.stderr)
        print("failed to parse the BEJ file.", file=sys.stderr)
        return 1

    print(f"successfully! JSON saved to file {json_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())