"""Example usage of the record text matcher with CSV files."""

import pandas as pd
import logging
from pathlib import Path
from typing import Optional

from text_matcher.config.models import (
    ColumnSearchConfig,
    MatchMethod,
    SearchStrategy
)
from text_matcher.config.rules import (
    DecimalRule,
    NonEmptyRule,
    NonZeroUnsignedIntegerRule,
    PatternRule,
    ValidationRules
)
from text_matcher.core.diagnostics import describe
from text_matcher.core.searcher import RecordSearcher


def create_student_searcher() -> RecordSearcher:
    """
    Create a searcher configured for student records.

    Returns:
        RecordSearcher: Configured searcher instance
    """
    strategies = [
        SearchStrategy(
            "name",
            [
                ColumnSearchConfig(
                    name='name',
                    match_method=MatchMethod.ORDERED,
                    is_required=True
                )
            ]
        ),
        SearchStrategy(
            "name_or_major",
            [
                ColumnSearchConfig(name='name', match_method=MatchMethod.ORDERED),
                ColumnSearchConfig(name='major', match_method=MatchMethod.CONTAINS)
            ]
        ),
        SearchStrategy(
            "student_id",
            [
                ColumnSearchConfig(
                    name='student_id',
                    match_method=MatchMethod.EXACT,
                    is_required=True
                )
            ]
        )
    ]

    validation_rules = ValidationRules(
        column_rules={
            'name': [NonEmptyRule()],
            'student_id': [PatternRule(r'[A-Z][0-9]{7}[A-Z]')],
            'index': [NonZeroUnsignedIntegerRule()],
            'score': [DecimalRule(max_decimal_places=2)]
        }
    )

    return RecordSearcher(strategies=strategies, validation_rules=validation_rules)

def search_csv_file(
    records_file: Path,
    query: str,
    strategy_name: Optional[str] = None,
    output_file: Optional[Path] = None
) -> pd.DataFrame:
    """
    Search records in a CSV file and report invalid fields.

    Args:
        records_file: Path to the records CSV file
        query: Free-text query
        strategy_name: Optional search strategy name
        output_file: Optional path for the matching rows

    Returns:
        pd.DataFrame: Matching records
    """
    try:
        # Configure logging
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s'
        )

        searcher = create_student_searcher()

        logging.info(f"Reading records file: {records_file}")
        df = pd.read_csv(records_file, dtype=str)

        # Report validation problems before searching
        invalid_fields = [r for r in searcher.validate(df) if not r.is_valid]
        for result in invalid_fields:
            logging.info(
                f"Row {result.row_index}: {result.column}={result.value!r} "
                f"failed {', '.join(result.failed_rules)}"
            )

        results = searcher.search(df, query, strategy_name)

        if output_file:
            logging.info(f"Saving results to: {output_file}")
            results.to_csv(output_file, index=False)

        return results

    except Exception as e:
        logging.error(f"An error occurred: {describe(e)}")
        raise

if __name__ == "__main__":
    # Example usage
    results_df = search_csv_file(
        records_file=Path('data/students.csv'),
        query='alex yeo',
        strategy_name='name_or_major',
        output_file=Path('data/search_results.csv')
    )
    print(results_df)
