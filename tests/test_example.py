"""Tests for the CSV search example."""

import importlib.util
from pathlib import Path

import pandas as pd
import pytest

EXAMPLE_PATH = Path(__file__).resolve().parent.parent / "examples" / "search_example.py"

CSV_CONTENT = """name,major,student_id,index,score
Alex Yeo,Computer Science,A0123456X,1,89.67
Bernice Yu,Mathematics,A7654321Y,2,80.5
,Physics,A1111111Z,0,100.001
"""


@pytest.fixture
def example():
    module_spec = importlib.util.spec_from_file_location("search_example", EXAMPLE_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / "students.csv"
    path.write_text(CSV_CONTENT)
    return path


class TestSearchExample:

    def test_searcher_configuration(self, example):
        searcher = example.create_student_searcher()
        assert [s.name for s in searcher.strategies] == ["name", "name_or_major", "student_id"]

    def test_search_csv_file(self, example, records_file, tmp_path):
        output_file = tmp_path / "results.csv"
        results = example.search_csv_file(
            records_file, "alex", "name_or_major", output_file=output_file
        )

        assert list(results['name']) == ['Alex Yeo']
        assert list(pd.read_csv(output_file, dtype=str)['student_id']) == ['A0123456X']

    def test_invalid_fields_are_reported(self, example, records_file):
        searcher = example.create_student_searcher()
        df = pd.read_csv(records_file, dtype=str)
        invalid = sorted(r.column for r in searcher.validate(df) if not r.is_valid)
        assert invalid == ['index', 'score']
