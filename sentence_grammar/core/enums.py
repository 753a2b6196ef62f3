from enum import Enum


class PartOfSpeech(str, Enum):
    NOUN = 'noun'
    VERB = 'verb'
    ADJECTIVE = 'adjective'
    ADVERB = 'adverb'
    PRONOUN = 'pronoun'
    PREPOSITION = 'preposition'
    CONJUNCTION = 'conjunction'
    ARTICLE = 'article'


class Tense(str, Enum):
    PRESENT_SIMPLE = 'Present Simple'
    PRESENT_CONTINUOUS = 'Present Continuous'
    PRESENT_PERFECT = 'Present Perfect'
    PRESENT_PERFECT_CONTINUOUS = 'Present Perfect Continuous'
    PAST_SIMPLE = 'Past Simple'
    PAST_CONTINUOUS = 'Past Continuous'
    PAST_PERFECT = 'Past Perfect'
    PAST_PERFECT_CONTINUOUS = 'Past Perfect Continuous'
    FUTURE_SIMPLE = 'Future Simple'
    FUTURE_CONTINUOUS = 'Future Continuous'
    FUTURE_PERFECT = 'Future Perfect'
    FUTURE_PERFECT_CONTINUOUS = 'Future Perfect Continuous'
    # would/could/should forms
    PAST_FUTURE_SIMPLE = 'Past Future Simple'
    PAST_FUTURE_CONTINUOUS = 'Past Future Continuous'
    PAST_FUTURE_PERFECT = 'Past Future Perfect'
    PAST_FUTURE_PERFECT_CONTINUOUS = 'Past Future Perfect Continuous'


class SentenceType(str, Enum):
    STATEMENT = 'Statement'
    QUESTION = 'Question'
    EXCLAMATION = 'Exclamation'
    COMMAND = 'Command'


class ComplexityLevel(str, Enum):
    SIMPLE = 'Simple'
    COMPOUND = 'Compound'
    COMPLEX = 'Complex'
    COMPOUND_COMPLEX = 'Compound-Complex'
