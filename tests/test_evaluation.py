import os
import sys
from datetime import datetime, timedelta

# Add the evaluation directory to path
EVAL_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'evaluation'))
if EVAL_DIR not in sys.path:
	sys.path.insert(0, EVAL_DIR)

import evaluation


SAMPLE_OUTPUT = """
============================= test session starts ==============================
collected 4 items

tests/test_braille_core.py::test_empty_tree PASSED                       [ 25%]
tests/test_braille_core.py::test_decode_worked_example FAILED            [ 50%]
tests/test_braille_service.py::test_load_table_malformed[-1\\n] SKIPPED   [ 75%]
tests/test_evaluation.py::test_parse ERROR                                [100%]
=========================== short test summary info ============================
FAILED tests/test_braille_core.py::test_decode_worked_example - assert 'A' == 'AA'
"""


def test_parse_pytest_verbose_output():
	tests = evaluation.parse_pytest_verbose_output(SAMPLE_OUTPUT)
	assert [t["outcome"] for t in tests] == ["passed", "failed", "skipped", "error"]
	assert tests[0]["nodeid"] == "tests/test_braille_core.py::test_empty_tree"
	assert tests[1]["name"] == "test_decode_worked_example"


def test_summarize_counts_outcomes():
	tests = evaluation.parse_pytest_verbose_output(SAMPLE_OUTPUT)
	summary = evaluation.summarize(tests)
	assert summary == {"total": 4, "passed": 1, "failed": 1, "error": 1, "skipped": 1}


def test_generate_output_path_layout():
	path = evaluation.generate_output_path(datetime(2026, 1, 2, 3, 4, 5))
	assert path.name == "report.json"
	assert path.parent.name == "03-04-05"
	assert path.parent.parent.name == "2026-01-02"


def test_build_report_failure_message():
	start = datetime(2026, 1, 1)
	report = evaluation.build_report("abcd1234", start, start + timedelta(seconds=2), {"success": False})
	assert report["success"] is False
	assert report["error"] == "Tests failed"
	assert report["duration_seconds"] == 2.0
	assert "python_version" in report["environment"]
