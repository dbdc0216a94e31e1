import logging
import os
from typing import Iterable, Sequence, Tuple

log = logging.getLogger(__name__)

# Used if the word list file is missing
DEFAULT_BADWORDS: Tuple[str, ...] = ("dumm", "scheiße", "saufen", "besoffen", "nackt", "porno")

DEFAULT_WORDLIST = "data/badwords.txt"


def parse_wordlist(lines: Iterable[str]) -> Tuple[str, ...]:
    """Terms in file order. Kept verbatim: no lower-casing, no dedupe."""
    terms = []
    for line in lines:
        w = line.strip()
        if not w or w.startswith("#"):
            continue
        terms.append(w)
    return tuple(terms)


def load_wordlist(path: str, fallback: Sequence[str] = DEFAULT_BADWORDS) -> Tuple[str, ...]:
    """Load newline wordlist or return fallback if file not found or empty."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            words = parse_wordlist(f)
    except FileNotFoundError:
        log.warning("word list %s not found, using %d built-in terms", path, len(fallback))
        return tuple(fallback)
    if not words:
        log.warning("word list %s has no terms, using %d built-in terms", path, len(fallback))
        return tuple(fallback)
    log.debug("loaded %d terms from %s", len(words), path)
    return words


def load_dictionary(cfg: dict, base_dir: str) -> Tuple[str, ...]:
    # relative paths resolve against the config file's directory
    path = (cfg or {}).get("wordlist") or DEFAULT_WORDLIST
    if not isinstance(path, str):
        raise ValueError(f"wordlist must be a file path, got {path!r}")
    if not os.path.isabs(path):
        path = os.path.normpath(os.path.join(base_dir, path))
    return load_wordlist(path)


if __name__ == "__main__":
    words = load_wordlist(DEFAULT_WORDLIST)
    print(len(words), words[:10])
