from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from brubble.personas.schemas import Persona
from brubble.sources.schemas import Platform, SearchResult


class AnalysisRequest(BaseModel):
    # Left permissive so that missing values surface as a 400 from the service
    query: str = ""
    personas: list[Persona] = Field(default_factory=list)


class SummaryStats(BaseModel):
    total_results: int
    unique_sources: int
    avg_sentiment: float
    top_sources: list[str]


class PersonaResults(BaseModel):
    persona: Persona
    results: list[SearchResult]
    summary_stats: SummaryStats
    used_mock_fallback: bool = False  # true when any result is fabricated


class ComparisonMetrics(BaseModel):
    persona_a: str | None = None
    persona_b: str | None = None
    echo_score: float  # 0-100
    overlap_percentage: float  # 0-100
    unique_to_a: list[SearchResult]
    unique_to_b: list[SearchResult]
    common_results: list[SearchResult]
    sentiment_divergence: float
    source_diversity_score: float  # distinct sources / 10, not clamped


# --- visualization payloads ---------------------------------------------


class PersonaRef(BaseModel):
    id: str
    name: str
    color: str


class OverlapSet(BaseModel):
    id: str
    label: str
    size: int
    color: str


class OverlapItem(BaseModel):
    title: str
    url: str


class OverlapGroup(BaseModel):
    sets: list[str]
    size: int
    items: list[OverlapItem]


class OverlapGraph(BaseModel):
    kind: Literal["overlap_graph"] = "overlap_graph"
    sets: list[OverlapSet]
    overlaps: list[OverlapGroup]


class SentimentDistribution(BaseModel):
    positive: int = 0
    neutral: int = 0
    negative: int = 0


class SentimentRange(BaseModel):
    min: float
    max: float


class PersonaSentiment(BaseModel):
    persona: PersonaRef
    avg_sentiment: float
    distribution: SentimentDistribution
    platform_sentiment: dict[Platform, SentimentDistribution]
    sentiment_range: SentimentRange


class SentimentBuckets(BaseModel):
    kind: Literal["sentiment_buckets"] = "sentiment_buckets"
    personas: list[PersonaSentiment]


class WordFrequency(BaseModel):
    text: str
    value: int


class PersonaWordCloud(BaseModel):
    persona: PersonaRef
    words: list[WordFrequency]


class WordFrequencyList(BaseModel):
    kind: Literal["word_frequency_list"] = "word_frequency_list"
    clouds: list[PersonaWordCloud]


class TimePeriods(BaseModel):
    last_day: int = 0
    last_week: int = 0
    last_month: int = 0
    older: int = 0


class HourlyCount(BaseModel):
    hour: str  # "H:00", UTC
    count: int


class PersonaTimeline(BaseModel):
    persona: PersonaRef
    periods: TimePeriods
    hourly_distribution: list[HourlyCount]
    oldest_result: datetime | None
    newest_result: datetime | None


class TimeBucketHistogram(BaseModel):
    kind: Literal["time_bucket_histogram"] = "time_bucket_histogram"
    timelines: list[PersonaTimeline]


class VisualizationData(BaseModel):
    venn_diagram: OverlapGraph | None  # None with fewer than two personas
    sentiment_map: SentimentBuckets
    word_clouds: WordFrequencyList
    timeline: TimeBucketHistogram


class BrubbleAnalysis(BaseModel):
    query: str
    timestamp: datetime
    personas: list[Persona]
    results: list[PersonaResults]
    metrics: list[ComparisonMetrics]  # consecutive persona pairs, len(personas) - 1
    insights: list[str]
    visualization_data: VisualizationData
