# src/post_filter.py
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

from fuzzy_match import match_term
from policy import DEFAULT_POLICY, MatchPolicy, load_config_and_base
from preprocess import prepare_text
from word_match import load_dictionary

log = logging.getLogger(__name__)

WARNING_TEMPLATE = (
    "Du hast das Wort '{term}' verwendet. "
    "Bist du dir sicher, dass du diesen Text so absenden möchtest?"
)


@dataclass(frozen=True)
class Verdict:
    """Scanner result: either clear (term is None) or the term that matched."""
    term: Optional[str] = None
    kind: Optional[str] = None

    @property
    def blocked(self) -> bool:
        return self.term is not None


NO_MATCH = Verdict()


def scan(text: str, dictionary: Iterable[str], policy: Optional[MatchPolicy] = None) -> Verdict:
    """
    First dictionary term (in dictionary order) found in text.
    text must already be lower-cased; nothing here rewrites it.
    """
    if not isinstance(text, str) or not text:
        return NO_MATCH
    policy = policy or DEFAULT_POLICY
    for term in dictionary:
        kind = match_term(text, term, policy)
        if kind:
            log.debug("matched %r via %s", term, kind)
            return Verdict(term=term, kind=kind)
    return NO_MATCH


def detect(text: str, dictionary: Iterable[str], policy: Optional[MatchPolicy] = None) -> Optional[str]:
    return scan(text, dictionary, policy).term


def format_warning(term: str) -> str:
    return WARNING_TEMPLATE.format(term=term)


class PostFilter:
    def __init__(
        self,
        config_path: str = "config.yaml",
        dictionary: Optional[Sequence[str]] = None,
        policy: Optional[MatchPolicy] = None,
    ):
        if dictionary is None or policy is None:
            cfg, base = load_config_and_base(config_path)
            if dictionary is None:
                dictionary = load_dictionary(cfg, base)
            if policy is None:
                policy = MatchPolicy.from_dict(cfg)
        self.dictionary = tuple(dictionary)
        self.policy = policy

    def check(self, text: str) -> Verdict:
        return scan(prepare_text(text), self.dictionary, self.policy)

    def analyze(self, text: str) -> Dict:
        pre = prepare_text(text)
        verdict = scan(pre, self.dictionary, self.policy)
        return {
            "raw": text,
            "pre": pre,
            "blocked": verdict.blocked,
            "term": verdict.term,
            "kind": verdict.kind,
            "message": format_warning(verdict.term) if verdict.blocked else None,
        }


if __name__ == "__main__":
    f = PostFilter()
    tests = [
        "Du bist so dumn heute",
        "Hab einen schönen Tag",
        "mein schluessel ist weg",
        "lass uns heute abend saufen gehen",
    ]
    for t in tests:
        print(f.analyze(t))
