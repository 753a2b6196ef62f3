from typing import List

from sentence_grammar.core.consts import TOKEN_EDGE_PUNCTUATION


def tokenize(sentence: str) -> List[str]:
    """
    Splits a sentence on whitespace into lowercase tokens with
    punctuation stripped from both edges. Empty tokens are dropped.
    """
    tokens = []
    for word in sentence.split():
        token = word.strip(TOKEN_EDGE_PUNCTUATION).lower()
        if token:
            tokens.append(token)
    return tokens
