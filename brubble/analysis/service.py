from collections.abc import Callable
from datetime import UTC, datetime

import structlog

from brubble.analysis.aggregator import ResultAggregator
from brubble.analysis.comparator import compare_consecutive
from brubble.analysis.insights import generate_insights
from brubble.analysis.schemas import BrubbleAnalysis
from brubble.analysis.visualizations import build_visualization_data
from brubble.exceptions import ValidationError
from brubble.personas.schemas import Persona

logger = structlog.get_logger()

_MIN_PERSONAS = 2


def _utcnow() -> datetime:
    return datetime.now(UTC)


class AnalysisService:
    def __init__(
        self,
        aggregator: ResultAggregator,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._aggregator = aggregator
        self._clock = clock

    async def analyze(self, query: str, personas: list[Persona]) -> BrubbleAnalysis:
        if not (query or "").strip() or len(personas) < _MIN_PERSONAS:
            raise ValidationError(f"Query and at least {_MIN_PERSONAS} personas are required")

        logger.info("analysis_started", query=query, personas=[p.id for p in personas])

        persona_results = await self._aggregator.collect_all(query, personas)
        metrics = compare_consecutive(persona_results)
        insights = generate_insights(metrics, personas)
        now = self._clock()

        logger.info(
            "analysis_completed",
            query=query,
            total_results=sum(pr.summary_stats.total_results for pr in persona_results),
            mock_personas=[pr.persona.id for pr in persona_results if pr.used_mock_fallback],
        )

        return BrubbleAnalysis(
            query=query,
            timestamp=now,
            personas=personas,
            results=persona_results,
            metrics=metrics,
            insights=insights,
            visualization_data=build_visualization_data(persona_results, now),
        )
