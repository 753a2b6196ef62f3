from typing import List, NamedTuple, Sequence

from sentence_grammar.core.consts import (
    FUTURE_AUXILIARIES,
    IRREGULAR_PAST_VERBS,
    MODAL_PAST_AUXILIARIES,
    PAST_BE_FORMS,
    PAST_SUFFIX,
    PERFECT_AUXILIARIES,
    PERFECT_PARTICIPLES,
    PRESENT_BE_FORMS,
    PROGRESSIVE_SUFFIX,
)
from sentence_grammar.core.enums import Tense
from sentence_grammar.core.services.rules import Rule, first_match


class TenseMarkers(NamedTuple):
    has_will: bool
    has_would: bool
    has_have: bool
    has_been: bool
    has_ing: bool
    has_ed: bool
    has_was: bool
    has_am: bool

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> 'TenseMarkers':
        words = set(tokens)
        return cls(
            has_will=not words.isdisjoint(FUTURE_AUXILIARIES),
            has_would=not words.isdisjoint(MODAL_PAST_AUXILIARIES),
            has_have=not words.isdisjoint(PERFECT_AUXILIARIES),
            has_been=not words.isdisjoint(PERFECT_PARTICIPLES),
            has_ing=any(t.endswith(PROGRESSIVE_SUFFIX) for t in tokens),
            has_ed=any(
                t.endswith(PAST_SUFFIX) or t in IRREGULAR_PAST_VERBS
                for t in tokens
            ),
            has_was=not words.isdisjoint(PAST_BE_FORMS),
            has_am=not words.isdisjoint(PRESENT_BE_FORMS),
        )


# Most specific combination first inside each family. The was+been+ing
# rule is shadowed by was+ing and never fires; the order is kept so the
# labels stay stable for existing sentences.
TENSE_RULES: List[Rule] = [
    (lambda m: m.has_will and m.has_ing, Tense.FUTURE_CONTINUOUS),
    (
        lambda m: m.has_will and m.has_have and m.has_been,
        Tense.FUTURE_PERFECT_CONTINUOUS,
    ),
    (lambda m: m.has_will and m.has_have, Tense.FUTURE_PERFECT),
    (lambda m: m.has_will, Tense.FUTURE_SIMPLE),
    (lambda m: m.has_would and m.has_ing, Tense.PAST_FUTURE_CONTINUOUS),
    (
        lambda m: m.has_would and m.has_have and m.has_been,
        Tense.PAST_FUTURE_PERFECT_CONTINUOUS,
    ),
    (lambda m: m.has_would and m.has_have, Tense.PAST_FUTURE_PERFECT),
    (lambda m: m.has_would, Tense.PAST_FUTURE_SIMPLE),
    (
        lambda m: m.has_have and m.has_been and m.has_ing,
        Tense.PRESENT_PERFECT_CONTINUOUS,
    ),
    (lambda m: m.has_have and m.has_been, Tense.PRESENT_PERFECT),
    (lambda m: m.has_have and m.has_ed, Tense.PRESENT_PERFECT),
    (lambda m: m.has_am and m.has_ing, Tense.PRESENT_CONTINUOUS),
    (lambda m: m.has_am, Tense.PRESENT_SIMPLE),
    (lambda m: m.has_was and m.has_ing, Tense.PAST_CONTINUOUS),
    (
        lambda m: m.has_was and m.has_been and m.has_ing,
        Tense.PAST_PERFECT_CONTINUOUS,
    ),
    (lambda m: m.has_was and m.has_been, Tense.PAST_PERFECT),
    (lambda m: m.has_ed, Tense.PAST_SIMPLE),
    (lambda m: m.has_was, Tense.PAST_SIMPLE),
]
DEFAULT_TENSE = Tense.PRESENT_SIMPLE


def classify_tense(tokens: Sequence[str]) -> Tense:
    return first_match(
        TenseMarkers.from_tokens(tokens), TENSE_RULES, DEFAULT_TENSE
    )
