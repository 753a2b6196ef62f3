import logging

from fastapi import APIRouter, status
from fastapi.routing import APIRoute

from sentence_grammar.api.errors import BadRequestError, InternalServerError
from sentence_grammar.api.schemas.grammar import (
    GrammarAnalysisRequest,
    GrammarAnalysisResponse,
)
from sentence_grammar.config import settings
from sentence_grammar.core.services.grammar_analyzer import analyze
from sentence_grammar.core.texts import format_grammar_feedback
from sentence_grammar.metrics import GRAMMAR_ANALYSIS_METRICS

logger = logging.getLogger(__name__)
router = APIRouter(route_class=APIRoute)


@router.post(
    '/analyze/',
    response_model=GrammarAnalysisResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {'description': 'Sentence is too long'},
    },
    summary='Analyze the grammar of a correct sentence',
    description=(
        'Classifies every word by part of speech and reports the tense, '
        'sentence type and complexity of the sentence. '
        'Accepts either the sentence text or its words in correct order.'
    ),
)
async def analyze_sentence(
    analysis_request: GrammarAnalysisRequest,
) -> GrammarAnalysisResponse:
    sentence = analysis_request.get_sentence()

    if len(sentence) > settings.max_sentence_length:
        logger.warning(
            f'Sentence of {len(sentence)} characters rejected, '
            f'limit is {settings.max_sentence_length}'
        )
        GRAMMAR_ANALYSIS_METRICS['rejected'].labels(reason='too_long').inc()
        raise BadRequestError(
            f'Sentence is longer than '
            f'{settings.max_sentence_length} characters'
        )

    try:
        with GRAMMAR_ANALYSIS_METRICS['analysis_time'].time():
            report = analyze(sentence)
    except Exception as e:
        logger.error(
            f'Unexpected error while analyzing sentence {sentence!r}: {e}',
            exc_info=True,
        )
        raise InternalServerError(
            'An unexpected error occurred while analyzing the sentence.'
        ) from e

    GRAMMAR_ANALYSIS_METRICS['analyses'].labels(
        tense=report.tense.value,
        sentence_type=report.sentence_type.value,
        complexity=report.complexity.level.value,
    ).inc()
    GRAMMAR_ANALYSIS_METRICS['words'].observe(report.word_count)

    return GrammarAnalysisResponse.from_report(
        report, format_grammar_feedback(report)
    )
