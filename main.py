"""
Review Insights - Customer Review Analysis

CLI entry point for running one analysis pass over a reviews export.
"""

import argparse
import logging
import sys

from src.agents.word_frequency import WordFrequencyAnalyzer, WordFrequencyPolicy
from src.models.criteria import ALL, DateRange, FilterCriteria, SortSpec, SORT_DIRECTIONS, SORT_FIELDS
from src.orchestrator import PipelineOrchestrator
from src.utils.storage import StorageManager, export_dataset
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Review Insights - Customer Review Analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summarize every review in the export
  python main.py --csv data/reviews.csv

  # Five-star reviews mentioning the attic, from the last 90 days
  python main.py --csv data/reviews.csv --rating 5 --search attic --last-days 90

  # Service-related reviews, oldest first, written to output/
  python main.py --csv data/reviews.csv --category Service \\
                 --sort-field Date --sort-direction asc --output-dir output

  # Publish the export as data/reviews.json + data/reviews.csv
  python main.py --csv export.csv --convert-to data
        """
    )

    parser.add_argument(
        "--csv",
        default=settings.REVIEWS_CSV,
        help=f"Reviews export to analyze (default: {settings.REVIEWS_CSV})"
    )

    # Filters
    parser.add_argument("--search", default="", help="Case-insensitive text/reviewer search")
    parser.add_argument("--start-date", help="Earliest review date (YYYY-MM-DD, inclusive)")
    parser.add_argument("--end-date", help="Latest review date (YYYY-MM-DD, inclusive)")
    parser.add_argument(
        "--last-days",
        type=int,
        choices=[d for d in settings.DATE_RANGE_PRESETS.values() if d],
        help="Only reviews from the last N days (overrides --start-date/--end-date)"
    )
    parser.add_argument(
        "--rating",
        default=ALL,
        choices=[ALL, "1", "2", "3", "4", "5"],
        help="Only reviews with this star rating"
    )
    parser.add_argument(
        "--category",
        default=ALL,
        choices=[ALL] + list(settings.WORD_CATEGORIES),
        help="Only reviews mentioning a keyword of this category"
    )

    # Sorting
    parser.add_argument("--sort-field", default=settings.DEFAULT_SORT_FIELD, choices=SORT_FIELDS)
    parser.add_argument(
        "--sort-direction",
        default=settings.DEFAULT_SORT_DIRECTION,
        choices=SORT_DIRECTIONS
    )

    parser.add_argument(
        "--word-policy",
        default=settings.WORD_FREQUENCY_POLICY,
        choices=[p.value for p in WordFrequencyPolicy],
        help="How top words follow a category filter (default: %(default)s)"
    )

    # Outputs
    parser.add_argument("--output-dir", help="Write filtered reviews (CSV) and summary (JSON) here")
    parser.add_argument("--convert-to", help="Write reviews.json and reviews.csv into this directory and exit")

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )
    return parser


def build_criteria(args: argparse.Namespace) -> FilterCriteria:
    if args.last_days:
        date_range = DateRange.last_n_days(args.last_days)
    else:
        date_range = DateRange(start=args.start_date, end=args.end_date)

    return FilterCriteria(
        search_term=args.search,
        date_range=date_range,
        rating_filter=args.rating,
        category=args.category
    )


def print_result(result) -> None:
    stats = result.stats

    print()
    print(f"Showing {len(result.reviews)} of {result.total_reviews} reviews")
    print(f"Average rating: {stats.average_rating:.1f}")
    print(f"5-star reviews: {stats.counts_by_star[5]} ({stats.star_percentage(5)}%)")
    print(f"Critical reviews: {stats.critical_count} ({stats.critical_percentage}%)")
    for star in range(5, 0, -1):
        print(f"  {star} star: {stats.counts_by_star[star]}")

    print()
    print("Top words:")
    if not result.top_words:
        print("  (none)")
    for entry in result.top_words:
        print(f"  {entry.word:<20} {entry.count}")


def main():
    """Main CLI entry point."""
    args = build_parser().parse_args()

    # Setup logging
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    print("=" * 60)
    print("Review Insights - Customer Review Analysis")
    print("=" * 60)
    print(f"Source: {args.csv}")

    try:
        orchestrator = PipelineOrchestrator(
            word_analyzer=WordFrequencyAnalyzer(policy=args.word_policy)
        )

        if args.convert_to:
            loaded = orchestrator.ingestion_agent.load(args.csv)
            if not loaded.ok:
                print(f"\n❌ Could not read {args.csv}: {loaded.error}")
                sys.exit(1)
            json_path, csv_path = export_dataset(loaded.records, args.csv, args.convert_to)
            print(f"Dataset written to {json_path} and {csv_path}")
            sys.exit(0)

        loaded = orchestrator.load(args.csv)
        if not loaded.ok:
            print(f"\n❌ Could not read {args.csv}: {loaded.error}")
            sys.exit(1)

        criteria = build_criteria(args)
        sort_spec = SortSpec(field=args.sort_field, direction=args.sort_direction)
        result = orchestrator.run(criteria, sort_spec)

        print_result(result)

        if args.output_dir:
            storage = StorageManager(args.output_dir)
            reviews_path = storage.save_reviews(result.reviews, "reviews_filtered")
            summary = result.to_dict()
            summary.pop("reviews")
            summary_path = storage.save_summary(summary, "summary")
            print()
            print(f"Reviews: {reviews_path}")
            print(f"Summary: {summary_path}")

        logger.info("Review Insights completed successfully")
        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user")
        print("\n⚠️  Analysis interrupted")
        sys.exit(1)

    except ValueError as e:
        logger.error(f"Invalid options: {e}")
        print(f"\n❌ Invalid options: {e}")
        sys.exit(2)

    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        print(f"\n❌ Analysis failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
