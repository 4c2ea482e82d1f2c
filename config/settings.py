"""
Configuration settings for Review Insights.

Centralized configuration for the analysis pipeline: input columns,
category keyword table, word-frequency parameters, paths and logging.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Input
REVIEWS_CSV = os.getenv("REVIEWS_CSV", str(DATA_ROOT / "reviews.csv"))
CSV_ENCODING = "utf-8"

# Recognized columns of the Google reviews export
DATE_COLUMN = "Date"
RATING_COLUMN = "Rating"
REVIEWER_COLUMN = "Reviewer"
TEXT_COLUMN = "Review Text"

# Rating tokens as they appear in the export
RATING_LABELS = {
    "ONE": 1,
    "TWO": 2,
    "THREE": 3,
    "FOUR": 4,
    "FIVE": 5,
}
DEFAULT_RATING = 5  # Used when the token is missing or unrecognized

# Returned for dates the parser cannot read
INVALID_DATE = "Invalid Date"

# Category filters (keywords are lowercase, matched as substrings)
WORD_CATEGORIES = {
    "Quality": ["professional", "excellent", "quality", "great", "thorough"],
    "Service": ["helpful", "courteous", "responsive", "service", "friendly"],
    "Technical": ["insulation", "attic", "foam", "efficient", "installation"],
    "Performance": ["temperature", "comfort", "energy", "cooling", "heating"],
}

# Word frequency
EXCLUDED_WORDS = frozenset([
    "this", "that", "they", "their", "there", "were", "with",
    "from", "have", "very", "would", "about", "also",
])
MIN_WORD_LENGTH = 4
TOP_WORDS_LIMIT = 20

# "narrow" reuses the last full top-words list when a category is active,
# "recompute" always counts words over the filtered reviews.
WORD_FREQUENCY_POLICY = "narrow"

# Date range presets offered to users (label -> days, None = all time)
DATE_RANGE_PRESETS = {
    "All Time": None,
    "Last 30 Days": 30,
    "Last 90 Days": 90,
    "Last Year": 365,
}

# Default ordering of the review table
DEFAULT_SORT_FIELD = "Date"
DEFAULT_SORT_DIRECTION = "desc"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "review_insights.log"
