from unittest.mock import MagicMock, patch

import pytest

from sentence_grammar.api.errors import BadRequestError
from sentence_grammar.api.schemas.grammar import GrammarAnalysisRequest
from sentence_grammar.api.v1.endpoints.grammar import analyze_sentence

pytestmark = pytest.mark.asyncio


@pytest.fixture
def mock_grammar_analysis_metrics():
    metrics = {
        'analyses': MagicMock(),
        'analysis_time': MagicMock(),
        'words': MagicMock(),
        'rejected': MagicMock(),
    }
    with patch(
        'sentence_grammar.api.v1.endpoints.grammar.GRAMMAR_ANALYSIS_METRICS',
        metrics,
    ):
        yield metrics


async def test_analyze_sentence_metrics(
    mock_grammar_analysis_metrics, compound_complex_sentence
):
    # Act
    response = await analyze_sentence(
        GrammarAnalysisRequest(sentence=compound_complex_sentence)
    )

    # Assert
    assert response.word_count == 9

    analyses_metric = mock_grammar_analysis_metrics['analyses']
    analyses_metric.labels.assert_called_once_with(
        tense='Past Continuous',
        sentence_type='Statement',
        complexity='Compound-Complex',
    )
    analyses_metric.labels().inc.assert_called_once()

    analysis_time_metric = mock_grammar_analysis_metrics['analysis_time']
    analysis_time_metric.time.assert_called_once()

    words_metric = mock_grammar_analysis_metrics['words']
    words_metric.observe.assert_called_once_with(9)

    mock_grammar_analysis_metrics['rejected'].labels.assert_not_called()


async def test_rejected_sentence_metrics(
    mock_grammar_analysis_metrics, max_sentence_length
):
    with pytest.raises(BadRequestError):
        await analyze_sentence(
            GrammarAnalysisRequest(sentence='y' * (max_sentence_length + 1))
        )

    rejected_metric = mock_grammar_analysis_metrics['rejected']
    rejected_metric.labels.assert_called_once_with(reason='too_long')
    rejected_metric.labels().inc.assert_called_once()

    mock_grammar_analysis_metrics['analyses'].labels.assert_not_called()
    mock_grammar_analysis_metrics['analysis_time'].time.assert_not_called()
