import random
from codesync.models.contest import Problem, TestCase
from codesync.services.judge import judge_code, simulated_timings
import pytest


def _problem(points, outputs):
    return Problem(
        contest_id="c", title="t", description="d", points=points,
        test_cases=[TestCase(input="", output=o) for o in outputs],
    )


def test_all_outputs_present_is_accepted():
    v = judge_code("print(25)", _problem(100, ["5", "25"]))
    assert v.status == "accepted"
    assert v.score == 100
    assert (v.test_cases_passed, v.total_test_cases) == (2, 2)


def test_match_is_case_insensitive():
    v = judge_code('PRINT("HELLO, WORLD!")', _problem(50, ["Hello, World!"]))
    assert v.status == "accepted" and v.score == 50


@pytest.mark.parametrize("code,points,outputs,expected", [
    ("print(5)", 100, ["5", "25"], 25),          # 1/2 of half points
    ("alpha", 100, ["alpha", "beta", "gamma"], 16),  # floor(16.66)
    ("alpha beta", 100, ["alpha", "beta", "gamma"], 33),
    ("alpha", 150, ["alpha", "beta", "gamma"], 25),
    ("nothing", 100, ["alpha", "beta"], 0),
])
def test_partial_credit_is_floored_half(code, points, outputs, expected):
    v = judge_code(code, _problem(points, outputs))
    assert v.status == "wrong_answer"
    assert v.score == expected


def test_problem_without_cases_is_vacuously_accepted():
    v = judge_code("anything", _problem(70, []))
    assert v.status == "accepted" and v.score == 70


def test_simulated_timings_ranges():
    rng = random.Random(42)
    for _ in range(200):
        taken, exec_ms = simulated_timings(rng)
        assert 5 <= taken <= 64
        assert 50 <= exec_ms <= 249
