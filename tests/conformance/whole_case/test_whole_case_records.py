"""
Conformance: caught-error and skipped records
A whole-case record applies to every test of its case.
"""
import pytest

from tests.conformance.logs import case, header, log, results


def caught(seq, implementation, **context):
    return {"seq": seq, "implementation": implementation, "caught": True, "context": context}


def skipped(seq, implementation, message="not supported"):
    return {"seq": seq, "implementation": implementation, "skipped": True, "message": message}


CASES = [
    (
        "caught_error",
        log(header("impl-a"), case(1, True, False), caught(1, "impl-a", message="boom")),
        {"errored_cases": 1, "errored_tests": 2, "skipped_tests": 0, "failed_tests": 0},
    ),
    (
        "caught_error_stderr_only",
        log(header("impl-a"), case(1, True, True, True), caught(1, "impl-a", stderr="trace")),
        {"errored_cases": 1, "errored_tests": 3},
    ),
    (
        "skipped",
        log(header("impl-a"), case(1, True, False), skipped(1, "impl-a")),
        {"skipped_tests": 2, "errored_cases": 0, "errored_tests": 0, "failed_tests": 0},
    ),
    (
        "mixed_implementations",
        log(
            header("impl-a", "impl-b", "impl-c"),
            case(1, True, False),
            caught(1, "impl-a", message="boom"),
            skipped(1, "impl-b"),
            results(1, "impl-c", True, True),
        ),
        {"total_tests": 2, "errored_cases": 1, "errored_tests": 2, "skipped_tests": 2,
         "failed_tests": 1},
    ),
]


@pytest.mark.parametrize("description,report_log,expected", CASES, ids=[c[0] for c in CASES])
def test_whole_case_records(runner, description, report_log, expected):
    """Caught errors and skips count once per test in the case."""
    outcome = runner.parse(report_log)
    assert outcome.valid, f"Expected a report but got errors: {outcome.diagnostics}"
    for name, value in expected.items():
        assert getattr(outcome.totals, name) == value, name
