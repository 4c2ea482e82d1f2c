"""
Review sorting.

Orders reviews by date, rating or reviewer name.
"""

import unicodedata
from typing import Callable, Dict, List, Tuple

from src.agents.normalization import date_sort_key
from src.models.criteria import SortSpec
from src.models.review import Review


def reviewer_sort_key(reviewer: str) -> Tuple[str, str]:
    """
    Case-insensitive collation key for a reviewer name.

    Accented letters sort with their base letter ("ÉMILE" before "ZOE");
    the uppercased name itself breaks ties between "EMILE" and "ÉMILE".
    """
    name = (reviewer or "").upper()
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, name


SORT_KEYS: Dict[str, Callable[[Review], object]] = {
    "Date": lambda r: date_sort_key(r.date),
    "Rating": lambda r: r.rating_value,
    "Reviewer": lambda r: reviewer_sort_key(r.reviewer),
}


def sort_reviews(reviews: List[Review], spec: SortSpec) -> List[Review]:
    """
    Return a new list ordered per `spec`.

    The sort is stable in both directions: reviews that compare equal
    keep their relative input order.
    """
    return sorted(reviews, key=SORT_KEYS[spec.field], reverse=spec.direction == "desc")
