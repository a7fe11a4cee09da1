"""Free-text search and field validation over record datasets."""

from typing import Any, Callable, Dict, List, Mapping, Optional
import pandas as pd
import logging
import time

from text_matcher.core.errors import check_argument, is_missing, require_non_null
from text_matcher.core.matcher import (
    contains_ignore_case,
    contains_ordered_substring,
    matches_ignore_case
)
from text_matcher.core.normalizer import normalize
from text_matcher.config.models import (
    ColumnSearchConfig,
    FieldValidationResult,
    MatchMethod,
    SearchStrategy
)
from text_matcher.config.rules import ValidationRules

class RecordSearcher:
    """
    Record search system applying text matchers to configured columns.
    """

    MATCHERS: Dict[MatchMethod, Callable[[str, str], bool]] = {
        MatchMethod.CONTAINS: contains_ignore_case,
        MatchMethod.ORDERED: contains_ordered_substring,
        MatchMethod.EXACT: matches_ignore_case
    }

    def __init__(
        self,
        strategies: List[SearchStrategy],
        validation_rules: Optional[ValidationRules] = None
    ):
        """
        Initialize the record searcher.

        Args:
            strategies: Search strategies, the first one is the default
            validation_rules: Optional rules for field validation
        """
        if not strategies:
            raise ValueError("At least one search strategy is required")

        self.strategies = strategies
        self.validation_rules = validation_rules
        self._strategies_by_name = {s.name: s for s in strategies}

        self._initialize_logging()

    def _initialize_logging(self) -> None:
        """Setup logging configuration."""
        self.logger = logging.getLogger(__name__)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter(
                    '%(asctime)s - %(levelname)s - %(message)s'
                )
            )
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def _get_strategy(self, strategy_name: Optional[str]) -> SearchStrategy:
        """Look up a strategy by name, defaulting to the first one."""
        if strategy_name is None:
            return self.strategies[0]

        strategy = self._strategies_by_name.get(strategy_name)
        if not strategy:
            raise ValueError(f"Unknown search strategy: {strategy_name}")
        return strategy

    def _column_matches(
        self,
        value: Any,
        query: str,
        col_config: ColumnSearchConfig
    ) -> bool:
        """Check a single field value, missing values never match."""
        if is_missing(value):
            return False
        return self.MATCHERS[col_config.match_method](str(value), query)

    def match_record(
        self,
        record: Mapping[str, Any],
        query: str,
        strategy: SearchStrategy
    ) -> bool:
        """
        Check whether a single record matches a query.

        Args:
            record: Mapping or pandas Series of column values
            query: Free-text query
            strategy: Strategy naming the columns to search

        Returns:
            bool: True if any column matches, or every column when the
                strategy has require_all set
        """
        results = (
            self._column_matches(record.get(col_config.name), query, col_config)
            for col_config in strategy.column_configs
        )
        return all(results) if strategy.require_all else any(results)

    def _check_required_columns(
        self,
        df: pd.DataFrame,
        strategy: SearchStrategy
    ) -> bool:
        """Check if all required columns exist in the dataframe."""
        for col_config in strategy.column_configs:
            if col_config.is_required and col_config.name not in df.columns:
                self.logger.warning(
                    f"Required column {col_config.name} not found in dataframe "
                    f"for strategy {strategy.name}. Skipping strategy."
                )
                return False
        return True

    def search(
        self,
        df: pd.DataFrame,
        query: str,
        strategy_name: Optional[str] = None
    ) -> pd.DataFrame:
        """
        Find records matching a free-text query.

        Args:
            df: Records to search
            query: Free-text query, cannot be empty
            strategy_name: Strategy to use, defaults to the first one

        Returns:
            pd.DataFrame: Matching rows with their original index

        Raises:
            NullArgumentError: If query is missing
            EmptyQueryError: If query is empty after normalization
            ValueError: If the strategy is unknown
        """
        start_time = time.time()

        strategy = self._get_strategy(strategy_name)
        require_non_null(query, 'query')
        check_argument(bool(normalize(query)), "Query parameter cannot be empty")

        if not self._check_required_columns(df, strategy):
            return df.iloc[0:0].copy()

        mask = pd.Series(
            [self.match_record(row, query, strategy) for _, row in df.iterrows()],
            index=df.index,
            dtype=bool
        )
        result_df = df.loc[mask].copy()

        self.logger.info(
            f"Search '{query}' with strategy {strategy.name} matched "
            f"{len(result_df)} of {len(df)} records in "
            f"{time.time() - start_time:.2f} seconds"
        )

        return result_df

    def validate(self, df: pd.DataFrame) -> List[FieldValidationResult]:
        """
        Validate every field that has rules configured.

        Args:
            df: Records to validate

        Returns:
            List[FieldValidationResult]: One result per checked field

        Raises:
            ValueError: If no validation rules were configured
        """
        if self.validation_rules is None:
            raise ValueError("No validation rules configured")

        results = []

        for column_name in self.validation_rules.column_rules:
            if column_name not in df.columns:
                self.logger.warning(
                    f"Validated column {column_name} not found in dataframe. "
                    "Skipping column."
                )
                continue

            for row_index, value in df[column_name].items():
                failed = self.validation_rules.failed_rules(column_name, value)
                results.append(FieldValidationResult(
                    column=column_name,
                    row_index=row_index,
                    value=value,
                    is_valid=not failed,
                    failed_rules=failed
                ))

        invalid_count = sum(1 for r in results if not r.is_valid)
        self.logger.info(
            f"Validated {len(results)} fields, {invalid_count} invalid"
        )

        return results

    def invalid_rows(self, df: pd.DataFrame) -> pd.DataFrame:
        """Return the rows having at least one invalid field."""
        invalid_indices = {
            result.row_index
            for result in self.validate(df)
            if not result.is_valid
        }
        return df.loc[df.index.isin(invalid_indices)].copy()
