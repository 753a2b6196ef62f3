from typing import Dict, List

from sentence_grammar.core.enums import PartOfSpeech
from sentence_grammar.core.value_objects.grammar import GrammarAnalysisReport

PART_OF_SPEECH_TITLES: Dict[PartOfSpeech, str] = {
    PartOfSpeech.NOUN: 'Nouns',
    PartOfSpeech.VERB: 'Verbs',
    PartOfSpeech.ADJECTIVE: 'Adjectives',
    PartOfSpeech.ADVERB: 'Adverbs',
    PartOfSpeech.PRONOUN: 'Pronouns',
    PartOfSpeech.PREPOSITION: 'Prepositions',
    PartOfSpeech.CONJUNCTION: 'Conjunctions',
    PartOfSpeech.ARTICLE: 'Articles',
}

GRAMMAR_FEEDBACK_HEADER = '📚 Grammar Analysis'


def format_grammar_feedback(report: GrammarAnalysisReport) -> str:
    """
    Renders the report as the read-only text shown after a correct answer.
    Empty part-of-speech groups are skipped.
    """
    lines: List[str] = [
        GRAMMAR_FEEDBACK_HEADER,
        f'📝 Sentence Type: {report.sentence_type.value}',
        f'🕐 Tense: {report.tense.value}',
    ]

    pos_lines = [
        f'  {PART_OF_SPEECH_TITLES[pos]}: {", ".join(words)}'
        for pos, words in report.parts_of_speech.items()
        if words
    ]
    if pos_lines:
        lines.append('🔤 Parts of Speech:')
        lines.extend(pos_lines)

    lines.append(f'🏗️ Complexity: {report.complexity.level.value}')
    lines.append(f'📊 Word Count: {report.word_count}')
    return '\n'.join(lines)
