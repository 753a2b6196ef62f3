"""
Closed-class word lists shared by every classifier.
"""

TOKEN_EDGE_PUNCTUATION = '.,!?;:'

ARTICLES = frozenset({'the', 'a', 'an'})

SUBJECT_PRONOUNS = frozenset({'i', 'you', 'he', 'she', 'it', 'we', 'they'})
OBJECT_PRONOUNS = frozenset({'me', 'him', 'her', 'us', 'them'})
POSSESSIVE_PRONOUNS = frozenset(
    {'my', 'your', 'his', 'her', 'its', 'our', 'their'}
)
PRONOUNS = SUBJECT_PRONOUNS | OBJECT_PRONOUNS | POSSESSIVE_PRONOUNS

COORDINATING_CONJUNCTIONS = frozenset(
    {'and', 'but', 'or', 'nor', 'for', 'yet', 'so'}
)
SUBORDINATING_CONJUNCTIONS = frozenset(
    {'because', 'although', 'while', 'if', 'when', 'where', 'since'}
)

# 'for' is also a conjunction; the conjunction rule runs first.
PREPOSITIONS = frozenset(
    {
        'in',
        'on',
        'at',
        'by',
        'for',
        'with',
        'to',
        'from',
        'up',
        'down',
        'over',
        'under',
        'through',
        'between',
        'among',
    }
)

ADVERBS = frozenset(
    {'very', 'quite', 'really', 'well', 'fast', 'hard', 'late', 'early'}
)
ADVERB_SUFFIXES = ('ly',)

# 'fast' is listed here too but is always caught by ADVERBS first.
ADJECTIVES = frozenset(
    {
        'big',
        'small',
        'good',
        'bad',
        'beautiful',
        'ugly',
        'happy',
        'sad',
        'fast',
        'slow',
        'hot',
        'cold',
        'new',
        'old',
        'young',
        'tall',
        'short',
    }
)
ADJECTIVE_SUFFIXES = ('ful', 'less', 'ous')

AUXILIARY_VERBS = frozenset(
    {
        'am',
        'is',
        'are',
        'was',
        'were',
        'be',
        'been',
        'being',
        'have',
        'has',
        'had',
        'do',
        'does',
        'did',
        'will',
        'would',
        'can',
        'could',
        'should',
        'may',
        'might',
        'must',
    }
)
VERB_SUFFIXES = ('ing', 'ed', 's')
PROGRESSIVE_SUFFIX = 'ing'
PAST_SUFFIX = 'ed'

# Simple past forms that the '-ed' suffix test cannot see. Forms that are
# identical to the base verb (put, read, cut) or that double as common
# nouns, adjectives or directions (left, saw, found, lost) are left out.
IRREGULAR_PAST_VERBS = frozenset(
    {
        'ate',
        'became',
        'began',
        'bought',
        'brought',
        'built',
        'came',
        'caught',
        'chose',
        'drank',
        'drove',
        'flew',
        'forgot',
        'gave',
        'got',
        'grew',
        'heard',
        'held',
        'knew',
        'made',
        'met',
        'paid',
        'ran',
        'sang',
        'sat',
        'said',
        'sent',
        'slept',
        'spoke',
        'stood',
        'swam',
        'taught',
        'thought',
        'told',
        'took',
        'understood',
        'went',
        'wore',
        'wrote',
    }
)

FUTURE_AUXILIARIES = frozenset({'will', 'shall'})
MODAL_PAST_AUXILIARIES = frozenset({'would', 'could', 'should'})
PERFECT_AUXILIARIES = frozenset({'have', 'has', 'had'})
PERFECT_PARTICIPLES = frozenset({'been', 'being'})
PAST_BE_FORMS = frozenset({'was', 'were'})
PRESENT_BE_FORMS = frozenset({'am', 'is', 'are'})

QUESTION_WORDS = frozenset({'what', 'where', 'when', 'why', 'how', 'who'})
COMMAND_OPENERS = frozenset(
    {'please', "don't", 'don’t', 'do', "let's", 'let’s'}
)
QUESTION_MARK = '?'
EXCLAMATION_MARK = '!'
COMMA = ','
SEMICOLON = ';'
