import logging

from sentence_grammar.core.services.complexity import analyze_complexity
from sentence_grammar.core.services.parts_of_speech import (
    analyze_parts_of_speech,
)
from sentence_grammar.core.services.sentence_type import (
    analyze_structure,
    classify_sentence_type,
)
from sentence_grammar.core.services.tense import classify_tense
from sentence_grammar.core.services.tokenizer import tokenize
from sentence_grammar.core.value_objects.grammar import GrammarAnalysisReport

logger = logging.getLogger(__name__)


def analyze(sentence: str) -> GrammarAnalysisReport:
    """
    Builds the grammar report for a sentence the player has already
    assembled correctly.

    The sentence is tokenized once and every classifier reads the same
    token list. Never raises for string input; unknown words and
    empty sentences fall back to the default labels.
    """
    tokens = tokenize(sentence)

    report = GrammarAnalysisReport(
        parts_of_speech=analyze_parts_of_speech(tokens),
        tense=classify_tense(tokens),
        sentence_type=classify_sentence_type(sentence, tokens),
        structure=analyze_structure(tokens),
        complexity=analyze_complexity(sentence, tokens),
        word_count=len(tokens),
    )
    logger.debug(
        f'Analyzed {report.word_count} tokens: '
        f'tense={report.tense.value}, '
        f'type={report.sentence_type.value}, '
        f'complexity={report.complexity.level.value}'
    )
    return report
