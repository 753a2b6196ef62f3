from typing import List, Sequence

from sentence_grammar.core.consts import (
    COMMA,
    COORDINATING_CONJUNCTIONS,
    SEMICOLON,
    SUBORDINATING_CONJUNCTIONS,
)
from sentence_grammar.core.enums import ComplexityLevel
from sentence_grammar.core.services.rules import Rule, first_match
from sentence_grammar.core.value_objects.grammar import ComplexityReport


def _is_compound(report: ComplexityReport) -> bool:
    return report.has_coordinating_conjunction or report.has_comma


# A semicolon alone makes a sentence complex but does not combine with a
# compound trigger into compound-complex; only a subordinator does.
COMPLEXITY_RULES: List[Rule] = [
    (
        lambda r: _is_compound(r) and r.has_subordinate_clause,
        ComplexityLevel.COMPOUND_COMPLEX,
    ),
    (
        lambda r: r.has_subordinate_clause or r.has_semicolon,
        ComplexityLevel.COMPLEX,
    ),
    (_is_compound, ComplexityLevel.COMPOUND),
]
DEFAULT_COMPLEXITY = ComplexityLevel.SIMPLE


def analyze_complexity(
    sentence: str, tokens: Sequence[str]
) -> ComplexityReport:
    flags = ComplexityReport(
        word_count=len(tokens),
        has_comma=COMMA in sentence,
        has_semicolon=SEMICOLON in sentence,
        has_coordinating_conjunction=any(
            t in COORDINATING_CONJUNCTIONS for t in tokens
        ),
        has_subordinate_clause=any(
            t in SUBORDINATING_CONJUNCTIONS for t in tokens
        ),
    )
    level = first_match(flags, COMPLEXITY_RULES, DEFAULT_COMPLEXITY)
    return flags.model_copy(update={'level': level})
