from typing import Dict, Iterator, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from sentence_grammar.core.enums import (
    ComplexityLevel,
    PartOfSpeech,
    SentenceType,
    Tense,
)

POS_REPORT_FIELDS: Dict[PartOfSpeech, str] = {
    PartOfSpeech.NOUN: 'nouns',
    PartOfSpeech.VERB: 'verbs',
    PartOfSpeech.ADJECTIVE: 'adjectives',
    PartOfSpeech.ADVERB: 'adverbs',
    PartOfSpeech.PRONOUN: 'pronouns',
    PartOfSpeech.PREPOSITION: 'prepositions',
    PartOfSpeech.CONJUNCTION: 'conjunctions',
    PartOfSpeech.ARTICLE: 'articles',
}


class GrammarValueObject(BaseModel):
    model_config = ConfigDict(
        frozen=True,
    )


class PartsOfSpeechReport(GrammarValueObject):
    nouns: Tuple[str, ...] = Field(default=(), description='Nouns')
    verbs: Tuple[str, ...] = Field(default=(), description='Verbs')
    adjectives: Tuple[str, ...] = Field(default=(), description='Adjectives')
    adverbs: Tuple[str, ...] = Field(default=(), description='Adverbs')
    pronouns: Tuple[str, ...] = Field(default=(), description='Pronouns')
    prepositions: Tuple[str, ...] = Field(
        default=(), description='Prepositions'
    )
    conjunctions: Tuple[str, ...] = Field(
        default=(), description='Coordinating conjunctions'
    )
    articles: Tuple[str, ...] = Field(default=(), description='Articles')

    @classmethod
    def from_buckets(
        cls, buckets: Mapping[PartOfSpeech, List[str]]
    ) -> 'PartsOfSpeechReport':
        return cls(
            **{
                field_name: tuple(buckets.get(pos, ()))
                for pos, field_name in POS_REPORT_FIELDS.items()
            }
        )

    def get(self, pos: PartOfSpeech) -> Tuple[str, ...]:
        return getattr(self, POS_REPORT_FIELDS[pos])

    def items(self) -> Iterator[Tuple[PartOfSpeech, Tuple[str, ...]]]:
        for pos in POS_REPORT_FIELDS:
            yield pos, self.get(pos)

    @property
    def total(self) -> int:
        return sum(len(words) for _, words in self.items())


class SentenceStructure(GrammarValueObject):
    has_subject: bool = Field(
        default=False, description='A subject pronoun is present'
    )
    has_object: bool = Field(
        default=False, description='An object pronoun is present'
    )
    has_adjective: bool = Field(
        default=False, description='A word ends with -ful, -less or -ous'
    )
    has_adverb: bool = Field(
        default=False, description='A word ends with -ly'
    )

    @computed_field  # type: ignore[misc]
    @property
    def has_modifier(self) -> bool:
        return self.has_adjective or self.has_adverb


class ComplexityReport(GrammarValueObject):
    level: ComplexityLevel = Field(
        default=ComplexityLevel.SIMPLE, description='Complexity level'
    )
    word_count: int = Field(default=0, description='Number of tokens')
    has_comma: bool = False
    has_semicolon: bool = False
    has_coordinating_conjunction: bool = False
    has_subordinate_clause: bool = False

    @computed_field  # type: ignore[misc]
    @property
    def has_punctuation_join(self) -> bool:
        return self.has_comma or self.has_semicolon


class GrammarAnalysisReport(GrammarValueObject):
    parts_of_speech: PartsOfSpeechReport = Field(
        description='Words grouped by part of speech'
    )
    tense: Tense = Field(description='Verb tense of the sentence')
    sentence_type: SentenceType = Field(description='Rhetorical type')
    structure: SentenceStructure = Field(
        description='Pronoun and modifier presence flags'
    )
    complexity: ComplexityReport = Field(description='Sentence complexity')
    word_count: int = Field(description='Number of tokens')
