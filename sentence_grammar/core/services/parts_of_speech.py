from typing import Dict, List, Sequence

from sentence_grammar.core.consts import (
    ADJECTIVE_SUFFIXES,
    ADJECTIVES,
    ADVERB_SUFFIXES,
    ADVERBS,
    ARTICLES,
    AUXILIARY_VERBS,
    COORDINATING_CONJUNCTIONS,
    IRREGULAR_PAST_VERBS,
    PREPOSITIONS,
    PRONOUNS,
    VERB_SUFFIXES,
)
from sentence_grammar.core.enums import PartOfSpeech
from sentence_grammar.core.services.rules import Rule, first_match
from sentence_grammar.core.value_objects.grammar import PartsOfSpeechReport

# Order matters: a token that fits several rules gets the first one.
# Plural nouns ("cats") hit the '-s' verb rule before reaching the default.
PART_OF_SPEECH_RULES: List[Rule] = [
    (lambda token: token in ARTICLES, PartOfSpeech.ARTICLE),
    (lambda token: token in PRONOUNS, PartOfSpeech.PRONOUN),
    (
        lambda token: token in COORDINATING_CONJUNCTIONS,
        PartOfSpeech.CONJUNCTION,
    ),
    (lambda token: token in PREPOSITIONS, PartOfSpeech.PREPOSITION),
    (
        lambda token: token.endswith(ADVERB_SUFFIXES) or token in ADVERBS,
        PartOfSpeech.ADVERB,
    ),
    (
        lambda token: token in AUXILIARY_VERBS
        or token in IRREGULAR_PAST_VERBS
        or token.endswith(VERB_SUFFIXES),
        PartOfSpeech.VERB,
    ),
    (
        lambda token: token in ADJECTIVES
        or token.endswith(ADJECTIVE_SUFFIXES),
        PartOfSpeech.ADJECTIVE,
    ),
]
DEFAULT_PART_OF_SPEECH = PartOfSpeech.NOUN


def classify_token(token: str) -> PartOfSpeech:
    return first_match(token, PART_OF_SPEECH_RULES, DEFAULT_PART_OF_SPEECH)


def analyze_parts_of_speech(tokens: Sequence[str]) -> PartsOfSpeechReport:
    """
    Puts every token into exactly one bucket, keeping sentence order and
    repeated words.
    """
    buckets: Dict[PartOfSpeech, List[str]] = {
        pos: [] for pos in PartOfSpeech
    }
    for token in tokens:
        buckets[classify_token(token)].append(token)
    return PartsOfSpeechReport.from_buckets(buckets)
