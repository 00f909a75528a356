from __future__ import annotations
import random
from dataclasses import dataclass
from codesync.models.contest import Problem

_rng = random.Random()


@dataclass(frozen=True)
class Verdict:
    status: str  # 'accepted' | 'wrong_answer'
    score: int
    test_cases_passed: int
    total_test_cases: int


def judge_code(code: str, problem: Problem) -> Verdict:
    """
    Mock judge. Nothing is executed: a test case counts as passed when its expected
    output appears (case-insensitively) somewhere in the submitted source.

    Full marks only when every case passes; otherwise half the points scaled by the
    pass ratio, rounded down.
    """
    haystack = str(code).lower()
    total = len(problem.test_cases)
    passed = sum(1 for tc in problem.test_cases if str(tc.output).lower() in haystack)

    if passed == total:
        return Verdict(status="accepted", score=problem.points, test_cases_passed=passed, total_test_cases=total)
    # integer form of floor(passed / total * points * 0.5)
    score = (passed * problem.points) // (2 * total)
    return Verdict(status="wrong_answer", score=score, test_cases_passed=passed, total_test_cases=total)


def simulated_timings(rng: random.Random | None = None) -> tuple[int, int]:
    """(time_taken minutes, execution_time ms) for a judged submission."""
    rng = rng or _rng
    return rng.randint(5, 64), rng.randint(50, 249)
