import unicodedata
from functools import lru_cache
from typing import Tuple

# applied in this order, every occurrence
SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (
    ("ä", "ae"),
    ("ö", "oe"),
    ("ü", "ue"),
    ("ß", "ss"),
    ("_", " "),
)


def normalize_term(term: str) -> str:
    for old, new in SUBSTITUTIONS:
        term = term.replace(old, new)
    return term


def collapse_spaces(text: str) -> str:
    return text.replace(" ", "")


@lru_cache(maxsize=4096)
def term_variants(term: str) -> Tuple[str, str]:
    """(normalized, space-collapsed) spellings of a dictionary term."""
    normalized = normalize_term(term)
    return normalized, collapse_spaces(normalized)


def strip_control_chars(text: str) -> str:
    # keep whitespace controls, the fuzzy step splits on them
    return ''.join(ch for ch in text if ch.isspace() or unicodedata.category(ch)[0] != "C")


def compose_unicode(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def prepare_text(text) -> str:
    """What the submit handler does to a post body before detection."""
    if not isinstance(text, str):
        return ""
    t = strip_control_chars(text)
    t = compose_unicode(t)
    t = t.lower()
    return t


if __name__ == "__main__":
    for w in ("schlüssel", "bad_word", "arschgefickte gummifotze", "scheiße"):
        print(w, "->", term_variants(w))
    print(prepare_text("Du bist so DUMM\u200b heute"))
