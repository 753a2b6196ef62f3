import pytest

from sentence_grammar.core.enums import Tense
from sentence_grammar.core.services.tense import (
    TENSE_RULES,
    TenseMarkers,
    classify_tense,
)
from sentence_grammar.core.services.tokenizer import tokenize


@pytest.mark.parametrize(
    'sentence, expected',
    [
        ('She will go home.', Tense.FUTURE_SIMPLE),
        ('We shall see.', Tense.FUTURE_SIMPLE),
        ('She will be working tomorrow.', Tense.FUTURE_CONTINUOUS),
        ('She will have finished.', Tense.FUTURE_PERFECT),
        ('She will have been there.', Tense.FUTURE_PERFECT_CONTINUOUS),
        ('He would go.', Tense.PAST_FUTURE_SIMPLE),
        ('He would be sleeping.', Tense.PAST_FUTURE_CONTINUOUS),
        ('He could have won.', Tense.PAST_FUTURE_PERFECT),
        (
            'He would have been there.',
            Tense.PAST_FUTURE_PERFECT_CONTINUOUS,
        ),
        (
            'I have been studying English for two years.',
            Tense.PRESENT_PERFECT_CONTINUOUS,
        ),
        ('I have been there.', Tense.PRESENT_PERFECT),
        ('She has finished her work.', Tense.PRESENT_PERFECT),
        ('She is reading a book.', Tense.PRESENT_CONTINUOUS),
        ('Is she coming?', Tense.PRESENT_CONTINUOUS),
        ('She is happy.', Tense.PRESENT_SIMPLE),
        ('They were playing football.', Tense.PAST_CONTINUOUS),
        ('It was been a while.', Tense.PAST_PERFECT),
        ('We walked to school.', Tense.PAST_SIMPLE),
        ('The cat sat on the mat.', Tense.PAST_SIMPLE),
        ('He was there.', Tense.PAST_SIMPLE),
        ('They have a car.', Tense.PRESENT_SIMPLE),
        ('Dogs bark.', Tense.PRESENT_SIMPLE),
        ('', Tense.PRESENT_SIMPLE),
    ],
)
def test_classify_tense(sentence, expected):
    assert classify_tense(tokenize(sentence)) == expected


def test_richer_future_rule_is_shadowed_by_continuous():
    # will + ing is checked before will + have + been.
    tokens = tokenize('She will have been working all day.')
    assert classify_tense(tokens) == Tense.FUTURE_CONTINUOUS


def test_past_perfect_continuous_is_shadowed_by_past_continuous():
    tokens = tokenize('He was been sleeping.')
    assert classify_tense(tokens) == Tense.PAST_CONTINUOUS


def test_future_family_wins_over_present():
    assert classify_tense(tokenize('It is what it will be.')) == (
        Tense.FUTURE_SIMPLE
    )


def test_compound_complex_sentence_tense(compound_complex_sentence):
    assert classify_tense(tokenize(compound_complex_sentence)) == (
        Tense.PAST_CONTINUOUS
    )


def test_tense_markers_from_tokens():
    markers = TenseMarkers.from_tokens(
        tokenize('I have been studying English.')
    )
    assert markers == TenseMarkers(
        has_will=False,
        has_would=False,
        has_have=True,
        has_been=True,
        has_ing=True,
        has_ed=False,
        has_was=False,
        has_am=False,
    )


def test_tense_markers_count_irregular_past_as_ed():
    assert TenseMarkers.from_tokens(['we', 'went', 'home']).has_ed


@pytest.mark.parametrize(
    'sentence',
    ['Turn left at the corner.', 'I have a saw.', 'We lost a key.'],
)
def test_noun_like_past_forms_are_not_past_markers(sentence):
    tokens = tokenize(sentence)
    assert not TenseMarkers.from_tokens(tokens).has_ed
    assert classify_tense(tokens) == Tense.PRESENT_SIMPLE


def test_tense_rules_order():
    results = [result for _, result in TENSE_RULES]
    assert results[:4] == [
        Tense.FUTURE_CONTINUOUS,
        Tense.FUTURE_PERFECT_CONTINUOUS,
        Tense.FUTURE_PERFECT,
        Tense.FUTURE_SIMPLE,
    ]
    assert results[-2:] == [Tense.PAST_SIMPLE, Tense.PAST_SIMPLE]
    assert len(results) == 18
