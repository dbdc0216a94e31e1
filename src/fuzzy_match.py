# src/fuzzy_match.py
from typing import Optional

from edit_distance import levenshtein
from policy import DEFAULT_POLICY, MatchPolicy
from preprocess import term_variants

EXACT = "exact"
NORMALIZED = "normalized"
COLLAPSED = "collapsed"
FUZZY = "fuzzy"

# loosest last; match_term stops at the first that hits
MATCH_KINDS = (EXACT, NORMALIZED, COLLAPSED, FUZZY)


def _similar_token(text: str, term: str, policy: MatchPolicy) -> bool:
    for tok in text.split():
        if abs(len(tok) - len(term)) > policy.max_length_delta:
            continue
        if levenshtein(tok, term) < policy.max_distance:
            return True
    return False


def match_term(text: str, term: str, policy: MatchPolicy = DEFAULT_POLICY) -> Optional[str]:
    """
    Check one dictionary term against an already lower-cased text.
    Returns the kind of the first strategy that hit, or None.
    """
    if not text or not term:
        return None

    if term in text:
        return EXACT

    normalized, collapsed = term_variants(term)
    if normalized in text:
        return NORMALIZED
    # a term made only of separators collapses to "" which is in every string
    if collapsed and collapsed in text:
        return COLLAPSED

    if _similar_token(text, term, policy):
        return FUZZY
    return None


if __name__ == "__main__":
    print(match_term("du bist so dumn heute", "dumm"))
    print(match_term("mein schluessel ist weg", "schlüssel"))
    print(match_term("so ein badword", "bad_word"))
