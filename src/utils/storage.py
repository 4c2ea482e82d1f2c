"""
Storage utility.

File I/O helpers for analysis outputs and dataset conversion.
"""

import json
import os
import shutil
import logging
from typing import List, Tuple

import pandas as pd

from src.models.review import RawRecord, Review

logger = logging.getLogger(__name__)

REVIEW_COLUMNS = ["date", "rating_value", "rating_label", "reviewer", "text", "raw_date"]


class StorageManager:
    """
    Manages file I/O for analysis outputs.

    Handles:
    - Filtered review tables (output/<name>.csv)
    - Pass summaries (output/<name>.json)
    - Raw dataset snapshots (data/reviews.json + data/reviews.csv)
    """

    def __init__(self, output_root: str):
        """
        Initialize storage manager.

        Args:
            output_root: Directory for analysis outputs
        """
        self.output_root = output_root
        os.makedirs(self.output_root, exist_ok=True)

        logger.info(f"Initialized StorageManager with output_root={output_root}")

    def save_reviews(self, reviews: List[Review], name: str) -> str:
        """
        Save reviews as a CSV table.

        Args:
            reviews: Reviews in display order
            name: Output file name without extension

        Returns:
            Path to the written CSV
        """
        filepath = os.path.join(self.output_root, f"{name}.csv")
        df = pd.DataFrame([r.to_dict() for r in reviews], columns=REVIEW_COLUMNS)

        try:
            df.to_csv(filepath, index=False)
            logger.info(f"Saved {len(df)} reviews to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save reviews to {filepath}: {e}")
            raise

        return filepath

    def save_summary(self, summary: dict, name: str) -> str:
        """
        Save a pass summary (stats, top words) as JSON.

        Args:
            summary: JSON-serializable dict
            name: Output file name without extension

        Returns:
            Path to the written JSON
        """
        filepath = os.path.join(self.output_root, f"{name}.json")

        try:
            with open(filepath, 'w') as f:
                json.dump(summary, f, indent=2)
            logger.info(f"Saved summary to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save summary to {filepath}: {e}")
            raise

        return filepath


def export_dataset(records: List[RawRecord], csv_path: str, data_dir: str) -> Tuple[str, str]:
    """
    Publish a reviews export for deployment.

    Writes the parsed records as data_dir/reviews.json and copies the
    source CSV to data_dir/reviews.csv.

    Returns:
        (json_path, csv_path) of the written files
    """
    os.makedirs(data_dir, exist_ok=True)

    json_output = os.path.join(data_dir, "reviews.json")
    with open(json_output, 'w') as f:
        json.dump(records, f, indent=2)
    logger.info(f"Converted {len(records)} reviews to JSON at {json_output}")

    csv_output = os.path.join(data_dir, "reviews.csv")
    if os.path.abspath(csv_path) != os.path.abspath(csv_output):
        shutil.copyfile(csv_path, csv_output)
        logger.info(f"Copied CSV to {csv_output}")

    return json_output, csv_output
