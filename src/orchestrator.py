"""
Pipeline Orchestrator.

Loads a reviews export once, then runs each analysis pass:
Filter → Sort → Stats → Word Frequency.
"""

import logging
from dataclasses import dataclass, field
from typing import IO, List, Optional, Union

from src.agents.aggregation import StatsAggregator
from src.agents.filtering import ReviewFilter
from src.agents.ingestion import IngestionAgent, IngestionResult
from src.agents.normalization import ReviewNormalizer
from src.agents.sorting import sort_reviews
from src.agents.word_frequency import WordFrequencyAnalyzer
from src.models.criteria import ALL, FilterCriteria, SortSpec
from src.models.review import Review
from src.models.summary import StatsSummary, WordFrequencyEntry
import config.settings as settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Output of one analysis pass.

    `top_words` is what should be displayed. `full_top_words` is the
    ranking from the most recent full recompute and must be passed as
    `previous_top_words` into the next pass.
    """
    reviews: List[Review]
    stats: StatsSummary
    top_words: List[WordFrequencyEntry]
    full_top_words: List[WordFrequencyEntry]
    total_reviews: int = 0

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "total_reviews": self.total_reviews,
            "shown_reviews": len(self.reviews),
            "stats": self.stats.to_dict(),
            "top_words": [entry.to_dict() for entry in self.top_words],
            "reviews": [review.to_dict() for review in self.reviews],
        }


class PipelineOrchestrator:
    """
    Coordinates the analysis stages.

    Holds the normalized dataset; every pass starts again from the full
    dataset, never from a previous pass's filtered reviews.
    """

    def __init__(
        self,
        ingestion_agent: Optional[IngestionAgent] = None,
        normalizer: Optional[ReviewNormalizer] = None,
        review_filter: Optional[ReviewFilter] = None,
        aggregator: Optional[StatsAggregator] = None,
        word_analyzer: Optional[WordFrequencyAnalyzer] = None
    ):
        self.ingestion_agent = ingestion_agent or IngestionAgent(encoding=settings.CSV_ENCODING)
        self.normalizer = normalizer or ReviewNormalizer()
        self.review_filter = review_filter or ReviewFilter()
        self.aggregator = aggregator or StatsAggregator()
        self.word_analyzer = word_analyzer or WordFrequencyAnalyzer()

        self.reviews: List[Review] = []
        self.baseline_top_words: List[WordFrequencyEntry] = []

    def load(self, source: Union[str, IO]) -> IngestionResult:
        """
        Read and normalize a reviews export.

        On failure the current dataset is left untouched and the failed
        IngestionResult is returned.
        """
        result = self.ingestion_agent.load(source)
        if not result.ok:
            logger.error(f"Load failed, pipeline not run: {result.error}")
            return result

        self.load_records(result.records)
        return result

    def load_records(self, raw_records) -> List[Review]:
        """Normalize already-parsed records and make them the dataset."""
        self.reviews = self.normalizer.normalize(raw_records)
        self.baseline_top_words = self.word_analyzer.analyze(self.reviews)
        logger.info(
            f"Dataset ready: {len(self.reviews)} reviews, "
            f"{len(self.baseline_top_words)} ranked words"
        )
        return self.reviews

    def run(
        self,
        criteria: FilterCriteria,
        sort_spec: SortSpec,
        previous_top_words: Optional[List[WordFrequencyEntry]] = None
    ) -> AnalysisResult:
        """
        Run one pass over the loaded dataset.

        Args:
            criteria: Active filters
            sort_spec: Active ordering
            previous_top_words: `full_top_words` of the previous pass;
                the ranking computed at load time when omitted

        Returns:
            AnalysisResult for this pass
        """
        if previous_top_words is None:
            previous_top_words = self.baseline_top_words
        return self.run_pass(self.reviews, criteria, sort_spec, previous_top_words)

    def run_pass(
        self,
        reviews: List[Review],
        criteria: FilterCriteria,
        sort_spec: SortSpec,
        previous_top_words: List[WordFrequencyEntry]
    ) -> AnalysisResult:
        """Filter, sort, summarize and rank words for the given reviews."""
        filtered = self.review_filter.apply(reviews, criteria)
        ordered = sort_reviews(filtered, sort_spec)
        stats = self.aggregator.aggregate(ordered)

        keywords = []
        if criteria.category != ALL:
            keywords = self.review_filter.keywords_for(criteria.category)

        top_words = self.word_analyzer.update(
            ordered, criteria.category, keywords, previous_top_words
        )
        if self.word_analyzer.recomputes(criteria.category):
            full_top_words = top_words
        else:
            full_top_words = list(previous_top_words)

        logger.info(
            f"Pass complete: {len(ordered)} of {len(reviews)} reviews, "
            f"average {stats.average_rating}, {len(top_words)} words"
        )
        return AnalysisResult(
            reviews=ordered,
            stats=stats,
            top_words=top_words,
            full_top_words=full_top_words,
            total_reviews=len(reviews)
        )


class ReviewSession:
    """
    Interactive state for one user looking at one dataset.

    Keeps the current criteria, ordering and last result, and re-runs
    the whole pipeline on every change.
    """

    def __init__(self, orchestrator: PipelineOrchestrator):
        self.orchestrator = orchestrator
        self.criteria = FilterCriteria()
        self.sort_spec = SortSpec(
            field=settings.DEFAULT_SORT_FIELD,
            direction=settings.DEFAULT_SORT_DIRECTION
        )
        self.result: Optional[AnalysisResult] = None

    def refresh(self) -> AnalysisResult:
        previous = self.result.full_top_words if self.result else None
        self.result = self.orchestrator.run(self.criteria, self.sort_spec, previous)
        return self.result

    def set_criteria(self, criteria: FilterCriteria) -> AnalysisResult:
        self.criteria = criteria
        return self.refresh()

    def sort_by(self, field: str) -> AnalysisResult:
        """Apply a column-header click."""
        self.sort_spec = self.sort_spec.toggled(field)
        return self.refresh()
