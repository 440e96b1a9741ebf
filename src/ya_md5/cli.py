from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from .config import LOG_LEVEL, TRACE
from .digest import Digest
from .errors import ReadError
from .hasher import hash_file, hash_from_reader, hash_text

logger = logging.getLogger(__name__)

PROG = "ya-md5"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Print or check MD5 (128-bit) checksums.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="files to hash; with no FILE, or when FILE is -, read standard input",
    )
    parser.add_argument(
        "-s",
        "--string",
        action="append",
        default=[],
        metavar="TEXT",
        help="hash TEXT (UTF-8) instead of a file; may be repeated",
    )
    parser.add_argument(
        "-c",
        "--check",
        metavar="SUMFILE",
        help="read checksums from SUMFILE and verify them",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log more detail (-v for debug, -vv for per-step trace)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = TRACE
    elif verbosity == 1:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(LOG_LEVEL)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _hash_name(name: str, stdin: TextIO) -> Digest:
    if name == "-":
        return hash_from_reader(stdin.buffer)
    return hash_file(name)


def _report(name: str, exc: Exception) -> None:
    cause = exc.__cause__ if exc.__cause__ is not None else exc
    print(f"{PROG}: {name}: {cause}", file=sys.stderr)


def _display(name: str) -> str:
    # Undecodable bytes from a sum file are kept as surrogates so the file
    # still opens; show them as replacement characters.
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _parse_sum_line(line: str) -> Optional[Tuple[Digest, str]]:
    # "<hex>  <name>" (text mode) or "<hex> *<name>" (binary mode)
    expected_hex, sep, rest = line.partition(" ")
    if not sep or rest[:1] not in (" ", "*") or len(rest) < 2:
        return None
    try:
        return Digest.from_hex(expected_hex), rest[1:]
    except ValueError:
        return None


def _check(sumfile: str, stdin: TextIO, out: TextIO) -> int:
    try:
        if sumfile == "-":
            lines = stdin.read().splitlines()
        else:
            with open(sumfile, "r", encoding="utf-8", errors="surrogateescape") as handle:
                lines = handle.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        _report(sumfile, exc)
        return 1

    status = 0
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        parsed = _parse_sum_line(line)
        if parsed is None:
            logger.warning("%s:%d: improperly formatted checksum line", sumfile, lineno)
            status = 1
            continue
        expected, name = parsed
        try:
            actual = _hash_name(name, stdin)
        except ReadError as exc:
            _report(_display(name), exc)
            status = 1
            continue
        if actual == expected:
            print(f"{_display(name)}: OK", file=out)
        else:
            print(f"{_display(name)}: FAILED", file=out)
            status = 1
    return status


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout

    if args.check:
        return _check(args.check, stdin, out)

    status = 0
    for text in args.string:
        print(f'{hash_text(text)}  "{text}"', file=out)

    names = args.files or ([] if args.string else ["-"])
    for name in names:
        try:
            digest = _hash_name(name, stdin)
        except ReadError as exc:
            _report(name, exc)
            status = 1
            continue
        print(f"{digest}  {name}", file=out)
    return status


__all__ = ["main"]
