from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from sentence_grammar.core.value_objects.grammar import GrammarAnalysisReport


class GrammarAnalysisRequest(BaseModel):
    sentence: Optional[str] = Field(
        default=None, description='Correct sentence to analyze'
    )
    words: Optional[List[str]] = Field(
        default=None,
        description='Correct word order of a sentence construction exercise',
    )

    @model_validator(mode='after')
    def check_exactly_one_source(self) -> 'GrammarAnalysisRequest':
        if (self.sentence is None) == (self.words is None):
            raise ValueError('Provide exactly one of "sentence" or "words"')
        return self

    def get_sentence(self) -> str:
        if self.sentence is not None:
            return self.sentence
        return ' '.join(word for word in self.words or [] if word.strip())


class GrammarAnalysisResponse(GrammarAnalysisReport):
    feedback: str = Field(description='Report rendered as feedback text')

    @classmethod
    def from_report(
        cls, report: GrammarAnalysisReport, feedback: str
    ) -> 'GrammarAnalysisResponse':
        return cls(**dict(report), feedback=feedback)
