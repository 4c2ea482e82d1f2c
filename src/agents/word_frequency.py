"""
Word Frequency Analyzer.

Ranks the most frequent words in review text, and decides how the
ranking follows category filters.
"""

import logging
import re
from collections import Counter
from enum import Enum
from typing import Iterable, List, Optional, Set

from src.models.criteria import ALL
from src.models.review import Review
from src.models.summary import WordFrequencyEntry
import config.settings as settings

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)
_ASCII_LETTER = re.compile(r"[a-zA-Z]")


class WordFrequencyPolicy(str, Enum):
    """
    How the word list reacts to an active category filter.

    NARROW_PREVIOUS: keep only category keywords from the last full
        ranking, without recounting. The result depends on which
        reviews were visible at that last full count.
    RECOMPUTE: always rank words over the currently filtered reviews.
    """
    NARROW_PREVIOUS = "narrow"
    RECOMPUTE = "recompute"


def tokenize(reviews: Iterable[Review], excluded: Set[str],
             min_length: int = settings.MIN_WORD_LENGTH) -> List[str]:
    """
    Split review text into countable words.

    Texts are joined with a space, lowercased and split on whitespace.
    Punctuation is stripped from each token; a token is kept when it is
    at least `min_length` long, not excluded, and has an ASCII letter.
    """
    text = " ".join(r.text for r in reviews if r.text).lower()

    words = []
    for token in _WHITESPACE.split(text):
        word = _NON_WORD.sub("", token)
        if len(word) < min_length or word in excluded:
            continue
        if not _ASCII_LETTER.search(word):
            continue
        words.append(word)
    return words


class WordFrequencyAnalyzer:
    """
    Produces the top-N word list shown next to the review table.
    """

    def __init__(
        self,
        excluded: Optional[Set[str]] = None,
        limit: int = settings.TOP_WORDS_LIMIT,
        min_length: int = settings.MIN_WORD_LENGTH,
        policy: WordFrequencyPolicy = WordFrequencyPolicy(settings.WORD_FREQUENCY_POLICY)
    ):
        """
        Args:
            excluded: Words never counted (defaults to settings.EXCLUDED_WORDS)
            limit: Maximum number of ranked entries
            min_length: Shortest word that is counted
            policy: Behavior while a category filter is active
        """
        self.excluded = set(excluded) if excluded is not None else set(settings.EXCLUDED_WORDS)
        self.limit = limit
        self.min_length = min_length
        self.policy = WordFrequencyPolicy(policy)

    def analyze(self, reviews: List[Review],
                excluded: Optional[Set[str]] = None) -> List[WordFrequencyEntry]:
        """
        Full recompute: rank words across all given reviews.

        Args:
            reviews: Reviews whose text is counted
            excluded: Overrides the analyzer's excluded words

        Returns:
            Up to `limit` entries, most frequent first; equal counts keep
            the order in which the words were first seen
        """
        excluded = self.excluded if excluded is None else excluded
        counts = Counter(tokenize(reviews, excluded, self.min_length))

        # Counter keeps first-seen order and sorted() is stable
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        entries = [WordFrequencyEntry(word=w, count=c) for w, c in ranked[:self.limit]]

        logger.debug(f"Counted {len(counts)} distinct words, kept {len(entries)}")
        return entries

    def narrow(self, previous: List[WordFrequencyEntry],
               keywords: Iterable[str]) -> List[WordFrequencyEntry]:
        """Keep only the entries of `previous` whose word is a keyword."""
        keyword_set = set(keywords)
        return [entry for entry in previous if entry.word in keyword_set]

    def recomputes(self, category: str) -> bool:
        """Whether a pass with this category counts words from scratch."""
        return category == ALL or self.policy == WordFrequencyPolicy.RECOMPUTE

    def update(
        self,
        reviews: List[Review],
        category: str,
        keywords: Iterable[str],
        previous: List[WordFrequencyEntry]
    ) -> List[WordFrequencyEntry]:
        """
        Word list for one analysis pass.

        Args:
            reviews: Filtered reviews of this pass
            category: Active category ("All" for none)
            keywords: Keywords of the active category
            previous: Ranking from the last full recompute

        Returns:
            The entries to display for this pass
        """
        if self.recomputes(category):
            return self.analyze(reviews)

        narrowed = self.narrow(previous, keywords)
        logger.debug(
            f"Narrowed {len(previous)} ranked words to {len(narrowed)} for category {category}"
        )
        return narrowed
