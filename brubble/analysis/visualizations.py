"""Chart payloads derived from the per-persona result lists."""

import re
from collections import Counter
from datetime import UTC, datetime, timedelta
from itertools import combinations

from brubble.analysis.schemas import (
    HourlyCount,
    OverlapGraph,
    OverlapGroup,
    OverlapItem,
    OverlapSet,
    PersonaRef,
    PersonaResults,
    PersonaSentiment,
    PersonaTimeline,
    PersonaWordCloud,
    SentimentBuckets,
    SentimentDistribution,
    SentimentRange,
    TimeBucketHistogram,
    TimePeriods,
    VisualizationData,
    WordFrequency,
    WordFrequencyList,
)
from brubble.sources.schemas import Platform

POSITIVE_THRESHOLD = 0.3
NEGATIVE_THRESHOLD = -0.3
WORD_CLOUD_SIZE = 50
MIN_WORD_LENGTH = 4

STOP_WORDS = frozenset(
    """
    the a an and or but in on at to for of with by from as is was are were been be
    have has had do does did will would could should may might can this that these
    those i you he she it we they what which who when where why how all each every
    both few more most other some such no nor not only own same so than too very
    just about s t
    """.split()
)

_PUNCTUATION_RE = re.compile(r"[^\w\s]")


def _ref(pr: PersonaResults) -> PersonaRef:
    return PersonaRef(id=pr.persona.id, name=pr.persona.name, color=pr.persona.color)


def _bucket(distribution: SentimentDistribution, sentiment: float) -> None:
    if sentiment > POSITIVE_THRESHOLD:
        distribution.positive += 1
    elif sentiment < NEGATIVE_THRESHOLD:
        distribution.negative += 1
    else:
        distribution.neutral += 1


def build_overlap_graph(persona_results: list[PersonaResults]) -> OverlapGraph | None:
    """Shared URLs for every pair of personas, and every triple when there are three or more."""
    if len(persona_results) < 2:
        return None

    sets = [
        OverlapSet(
            id=pr.persona.id,
            label=pr.persona.name,
            size=len(pr.results),
            color=pr.persona.color,
        )
        for pr in persona_results
    ]
    url_sets = [{r.url for r in pr.results} for pr in persona_results]

    overlaps: list[OverlapGroup] = []
    for group_size in (2, 3):
        for group in combinations(range(len(persona_results)), group_size):
            first, *rest = group
            shared = [
                r
                for r in persona_results[first].results
                if all(r.url in url_sets[other] for other in rest)
            ]
            # pairs are always reported, triples only when they share something
            if group_size == 3 and not shared:
                continue
            overlaps.append(
                OverlapGroup(
                    sets=[persona_results[i].persona.id for i in group],
                    size=len(shared),
                    items=[OverlapItem(title=r.title, url=r.url) for r in shared],
                )
            )

    return OverlapGraph(sets=sets, overlaps=overlaps)


def build_sentiment_map(persona_results: list[PersonaResults]) -> SentimentBuckets:
    personas = []
    for pr in persona_results:
        distribution = SentimentDistribution()
        by_platform: dict[Platform, SentimentDistribution] = {}
        scores = []
        for result in pr.results:
            sentiment = result.sentiment or 0.0
            scores.append(sentiment)
            _bucket(distribution, sentiment)
            _bucket(by_platform.setdefault(result.platform, SentimentDistribution()), sentiment)

        personas.append(
            PersonaSentiment(
                persona=_ref(pr),
                avg_sentiment=pr.summary_stats.avg_sentiment,
                distribution=distribution,
                platform_sentiment=by_platform,
                sentiment_range=SentimentRange(
                    min=min(scores, default=0.0), max=max(scores, default=0.0)
                ),
            )
        )
    return SentimentBuckets(personas=personas)


def word_frequencies(texts: list[str], limit: int = WORD_CLOUD_SIZE) -> list[WordFrequency]:
    text = _PUNCTUATION_RE.sub(" ", " ".join(texts).lower())
    counts = Counter(
        word for word in text.split() if len(word) >= MIN_WORD_LENGTH and word not in STOP_WORDS
    )
    return [WordFrequency(text=word, value=count) for word, count in counts.most_common(limit)]


def build_word_clouds(persona_results: list[PersonaResults]) -> WordFrequencyList:
    return WordFrequencyList(
        clouds=[
            PersonaWordCloud(
                persona=_ref(pr),
                words=word_frequencies([f"{r.title} {r.snippet}" for r in pr.results]),
            )
            for pr in persona_results
        ]
    )


def build_timeline(
    persona_results: list[PersonaResults], now: datetime | None = None
) -> TimeBucketHistogram:
    now = now or datetime.now(UTC)
    one_day_ago = now - timedelta(days=1)
    one_week_ago = now - timedelta(days=7)
    one_month_ago = now - timedelta(days=30)

    timelines = []
    for pr in persona_results:
        periods = TimePeriods()
        hourly: Counter[int] = Counter()
        stamps = [r.timestamp for r in pr.results if r.timestamp is not None]

        for stamp in stamps:
            if stamp >= one_day_ago:
                periods.last_day += 1
                hourly[stamp.astimezone(UTC).hour] += 1
            elif stamp >= one_week_ago:
                periods.last_week += 1
            elif stamp >= one_month_ago:
                periods.last_month += 1
            else:
                periods.older += 1

        timelines.append(
            PersonaTimeline(
                persona=_ref(pr),
                periods=periods,
                hourly_distribution=[
                    HourlyCount(hour=f"{hour}:00", count=hourly[hour]) for hour in sorted(hourly)
                ],
                oldest_result=min(stamps, default=None),
                newest_result=max(stamps, default=None),
            )
        )
    return TimeBucketHistogram(timelines=timelines)


def build_visualization_data(
    persona_results: list[PersonaResults], now: datetime | None = None
) -> VisualizationData:
    return VisualizationData(
        venn_diagram=build_overlap_graph(persona_results),
        sentiment_map=build_sentiment_map(persona_results),
        word_clouds=build_word_clouds(persona_results),
        timeline=build_timeline(persona_results, now),
    )
