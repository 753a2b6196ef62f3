import pytest

from sentence_grammar.core.services.tokenizer import tokenize


@pytest.fixture
def sample_sentences():
    return [
        '',
        '   ',
        'The cat sat on the mat.',
        'What is your name?',
        'I have been studying English for two years.',
        'Although it was raining, we went outside and played.',
        'Please close the door!',
        'She will have finished her beautiful painting very soon.',
        'They were walking home; the streets were quiet.',
        '... ?! ,',
    ]


@pytest.fixture
def tokens_of():
    return tokenize
