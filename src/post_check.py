# src/post_check.py
import argparse
import sys
from typing import Callable, Optional, TextIO, Tuple

import yaml

from logging_config import configure_logging
from post_filter import PostFilter, format_warning

EXIT_CLEAR = 0
EXIT_BLOCKED = 1
EXIT_ERROR = 2

CONFIRM_PROMPT = "Trotzdem senden? [j/N] "
YES = {"j", "ja", "y", "yes"}


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def _process_line(
    pf: PostFilter,
    line: str,
    confirm: bool = False,
    ask: Callable[[str], str] = _ask,
) -> Tuple[str, Optional[str]]:
    """
    Check one post. Returns (action, term):
    "pass"  -> nothing matched
    "warn"  -> matched, not confirmed (or no confirmation asked)
    "sent"  -> matched, user chose to send anyway
    "held"  -> matched, user declined
    """
    verdict = pf.check(line)
    if not verdict.blocked:
        print(f"[pass] {line}", flush=True)
        return "pass", None

    print(f"[warn] {format_warning(verdict.term)}", flush=True)
    if not confirm:
        return "warn", verdict.term

    answer = ask(CONFIRM_PROMPT).strip().lower()
    if answer in YES:
        print(f"[sent] {line}", flush=True)
        return "sent", verdict.term
    print(f"[held] {line}", flush=True)
    return "held", verdict.term


def run_cli(pf: PostFilter, stream: TextIO, confirm: bool = False, ask: Callable[[str], str] = _ask) -> int:
    blocked = False
    while True:
        line = stream.readline()
        if not line:
            break
        line = line.rstrip("\n")
        if not line.strip():
            continue
        action, _ = _process_line(pf, line, confirm=confirm, ask=ask)
        if action in ("warn", "held"):
            blocked = True
    return EXIT_BLOCKED if blocked else EXIT_CLEAR


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="uppassn",
        description="Check a status post against the bad-word list before sending it.",
    )
    ap.add_argument("text", nargs="?", default=None, help="post text; read lines from stdin when omitted")
    ap.add_argument("--config", default="config.yaml", help="path to config.yaml")
    ap.add_argument("--confirm", action="store_true", help="ask before sending a flagged post")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    try:
        pf = PostFilter(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"[error] {type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.text is None:
        return run_cli(pf, sys.stdin, confirm=args.confirm)

    action, _ = _process_line(pf, args.text, confirm=args.confirm)
    return EXIT_BLOCKED if action in ("warn", "held") else EXIT_CLEAR


if __name__ == "__main__":
    sys.exit(main())
