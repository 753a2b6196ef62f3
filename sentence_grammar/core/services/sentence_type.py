from typing import List, NamedTuple, Optional, Sequence

from sentence_grammar.core.consts import (
    ADJECTIVE_SUFFIXES,
    ADVERB_SUFFIXES,
    COMMAND_OPENERS,
    EXCLAMATION_MARK,
    OBJECT_PRONOUNS,
    QUESTION_MARK,
    QUESTION_WORDS,
    SUBJECT_PRONOUNS,
)
from sentence_grammar.core.enums import SentenceType
from sentence_grammar.core.services.rules import Rule, first_match
from sentence_grammar.core.value_objects.grammar import SentenceStructure


class SentenceCue(NamedTuple):
    sentence: str
    first_token: Optional[str]


SENTENCE_TYPE_RULES: List[Rule] = [
    (
        lambda cue: QUESTION_MARK in cue.sentence
        or cue.first_token in QUESTION_WORDS,
        SentenceType.QUESTION,
    ),
    (
        lambda cue: EXCLAMATION_MARK in cue.sentence,
        SentenceType.EXCLAMATION,
    ),
    (lambda cue: cue.first_token in COMMAND_OPENERS, SentenceType.COMMAND),
]
DEFAULT_SENTENCE_TYPE = SentenceType.STATEMENT


def classify_sentence_type(
    sentence: str, tokens: Sequence[str]
) -> SentenceType:
    cue = SentenceCue(sentence, tokens[0] if tokens else None)
    return first_match(cue, SENTENCE_TYPE_RULES, DEFAULT_SENTENCE_TYPE)


def analyze_structure(tokens: Sequence[str]) -> SentenceStructure:
    return SentenceStructure(
        has_subject=any(t in SUBJECT_PRONOUNS for t in tokens),
        has_object=any(t in OBJECT_PRONOUNS for t in tokens),
        has_adjective=any(t.endswith(ADJECTIVE_SUFFIXES) for t in tokens),
        has_adverb=any(t.endswith(ADVERB_SUFFIXES) for t in tokens),
    )
