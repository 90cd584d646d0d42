from brubble.analysis.schemas import ComparisonMetrics
from brubble.personas.schemas import Persona, PersonaCategory

HIGH_ECHO = 70
MODERATE_ECHO = 40
HIGH_SOURCE_DIVERSITY = 0.7
LOW_SOURCE_DIVERSITY = 0.4
SENTIMENT_GAP = 0.6


def _echo_insight(avg_echo: float) -> str:
    if avg_echo > HIGH_ECHO:
        return (
            f"⚠️ High Echo Chamber Effect: {avg_echo:.0f}% average similarity across "
            "perspectives suggests significant information bubbles. Different personas "
            "are seeing very similar content."
        )
    if avg_echo > MODERATE_ECHO:
        return (
            f"📊 Moderate Information Diversity: {avg_echo:.0f}% average similarity shows "
            "some overlap but also distinct perspectives across personas."
        )
    return (
        f"✅ Strong Perspective Diversity: {avg_echo:.0f}% average similarity indicates "
        "each persona is experiencing significantly different information landscapes."
    )


def _source_insight(avg_diversity: float) -> str | None:
    if avg_diversity > HIGH_SOURCE_DIVERSITY:
        return (
            "📰 Excellent Source Variety: High diversity of news sources "
            f"({avg_diversity * 10:.1f} unique sources on average) provides broader "
            "information exposure."
        )
    if avg_diversity < LOW_SOURCE_DIVERSITY:
        return (
            "⚠️ Limited Source Pool: Results are drawn from a relatively small set of "
            "sources, which may indicate algorithmic filtering or availability bias."
        )
    return None


def generate_insights(metrics: list[ComparisonMetrics], personas: list[Persona]) -> list[str]:
    """Templated observations, in order: echo, sources, sentiment gap, politics."""
    if not metrics:
        return []

    insights = [_echo_insight(sum(m.echo_score for m in metrics) / len(metrics))]

    source_insight = _source_insight(
        sum(m.source_diversity_score for m in metrics) / len(metrics)
    )
    if source_insight:
        insights.append(source_insight)

    max_gap = max(m.sentiment_divergence for m in metrics)
    if max_gap > SENTIMENT_GAP:
        insights.append(
            "🎭 Significant Sentiment Gap: Different personas are encountering substantially "
            f"different emotional tones in their results (divergence: {max_gap:.2f}), "
            "suggesting polarized information exposure."
        )

    political = [p for p in personas if p.category == PersonaCategory.political]
    if len(political) >= 2:
        names = " vs ".join(p.name for p in political)
        insights.append(
            f"🗳️ Political Perspective Analysis: Comparing {names} reveals how political "
            "leanings influence search result exposure and framing."
        )

    return insights
