from sentence_grammar.core.services.grammar_analyzer import analyze
from sentence_grammar.core.value_objects.grammar import GrammarAnalysisReport

__all__ = ['analyze', 'GrammarAnalysisReport']
