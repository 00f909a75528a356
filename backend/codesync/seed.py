from __future__ import annotations
from datetime import datetime, timedelta, timezone as dt_tz
from codesync.db import Store
from codesync.models.contest import Contest, Problem, TestCase
from codesync.models.submission import Submission
from codesync.models.user import User
from codesync.security import hash_password

DEMO_EMAIL = "demo@demo.com"
DEMO_PASSWORD = "demo123"


def _problem(pid, contest_id, title, description, input_format, output_format, sample_in, sample_out,
             difficulty, points, cases, memory_limit=256):
    return Problem(
        id=pid, contest_id=contest_id, title=title, description=description,
        input_format=input_format, output_format=output_format,
        sample_input=sample_in, sample_output=sample_out,
        time_limit=1000, memory_limit=memory_limit, difficulty=difficulty, points=points,
        test_cases=[TestCase(input=i, output=o, is_hidden=h) for (i, o, h) in cases],
    )


def seed_demo_data(store: Store, now: datetime | None = None) -> Store:
    """Populate the store with the demo user, contests, problems and leaderboard submissions.

    Times are relative to ``now`` so the demo sprint is always running right after start-up.
    """
    now = now or datetime.now(dt_tz.utc)

    if not store.find_user_by_email(DEMO_EMAIL):
        store.users.append(User(
            id="user-demo", username="demo", email=DEMO_EMAIL, password_hash=hash_password(DEMO_PASSWORD),
        ))

    store.contests.extend([
        Contest(
            id="contest-1",
            title="Weekly Coding Challenge",
            description="A weekly challenge featuring algorithmic problems of varying difficulty.",
            start_time=now + timedelta(days=1),
            end_time=now + timedelta(days=3),
            duration=180,
            max_participants=100,
            current_participants=45,
            problems=["prob-1", "prob-2", "prob-3"],
            created_by="admin",
            created_at=now,
        ),
        Contest(
            id="contest-2",
            title="Beginner Friendly Contest",
            description="Perfect for those starting their competitive programming journey.",
            start_time=now - timedelta(minutes=30),
            end_time=now + timedelta(hours=2),
            duration=120,
            max_participants=50,
            current_participants=32,
            problems=["prob-4", "prob-5"],
            created_by="mentor1",
            created_at=now,
        ),
        Contest(
            id="contest-demo",
            title="Demo Sprint Contest",
            description="A fully functional demo contest with multiple problems and a live leaderboard.",
            start_time=now - timedelta(minutes=15),
            end_time=now + timedelta(minutes=45),
            duration=60,
            max_participants=200,
            current_participants=5,
            problems=["demo-1", "demo-2", "demo-3"],
            created_by="system",
            created_at=now,
        ),
    ])

    store.problems.extend([
        _problem("prob-1", "contest-1", "Two Sum", "Return indices of two numbers that add up to target.",
                 "n, array, target", "two indices", "4\n2 7 11 15\n9", "0 1", "Easy", 100,
                 [("4\n2 7 11 15\n9", "0 1", False), ("3\n3 2 4\n6", "1 2", False)]),
        _problem("prob-2", "contest-1", "Valid Parentheses", "Determine if the input string is valid parentheses.",
                 "string s", "true/false", "()", "true", "Easy", 100,
                 [("()", "true", False), ("([)]", "false", True)]),
        _problem("prob-3", "contest-1", "Maximum Subarray", "Find maximum subarray sum.",
                 "n and array", "max sum", "5\n-2 1 -3 4 -1", "4", "Medium", 150,
                 [("5\n-2 1 -3 4 -1", "4", False)]),
        _problem("prob-4", "contest-2", "Sum of Array", "Sum the array elements.",
                 "n and array", "sum", "5\n1 2 3 4 5", "15", "Easy", 100,
                 [("5\n1 2 3 4 5", "15", False)]),
        _problem("prob-5", "contest-2", "Count Evens", "Count even numbers in an array.",
                 "n and array", "count", "6\n1 2 3 4 5 6", "3", "Easy", 100,
                 [("6\n1 2 3 4 5 6", "3", False)]),
        _problem("demo-1", "contest-demo", "Print Hello", 'Output the text "Hello, World!" exactly.',
                 "No input", "Hello, World!", "", "Hello, World!", "Easy", 50,
                 [("", "Hello, World!", False)], memory_limit=128),
        _problem("demo-2", "contest-demo", "Sum Two Numbers", "Given two integers, print their sum.",
                 "Two space-separated integers a b", "Single integer a+b", "2 3", "5", "Easy", 100,
                 [("2 3", "5", False), ("10 15", "25", True)], memory_limit=128),
        _problem("demo-3", "contest-demo", "Reverse String", "Read a string and print it reversed.",
                 "A single string s", "Reversed string", "abcd", "dcba", "Medium", 150,
                 [("abcd", "dcba", False), ("racecar", "racecar", True)], memory_limit=128),
    ])

    store.submissions.extend([
        Submission(
            id="sub-seed-1", contest_id="contest-demo", problem_id="demo-1", user_id="user1", username="alice",
            code='print("Hello, World!")', language="python", status="accepted", score=50, time_taken=3,
            submitted_at=now - timedelta(minutes=10), test_cases_passed=1, total_test_cases=1, execution_time=30,
        ),
        Submission(
            id="sub-seed-2", contest_id="contest-demo", problem_id="demo-2", user_id="user1", username="alice",
            code="print(5)", language="python", status="accepted", score=100, time_taken=8,
            submitted_at=now - timedelta(minutes=8), test_cases_passed=2, total_test_cases=2, execution_time=40,
        ),
        Submission(
            id="sub-seed-3", contest_id="contest-demo", problem_id="demo-1", user_id="user2", username="bob",
            code='console.log("Hello, World!")', language="javascript", status="accepted", score=50, time_taken=5,
            submitted_at=now - timedelta(minutes=9), test_cases_passed=1, total_test_cases=1, execution_time=25,
        ),
        Submission(
            id="sub-seed-4", contest_id="contest-demo", problem_id="demo-3", user_id="user2", username="bob",
            code='print("dcba")', language="python", status="wrong_answer", score=0, time_taken=12,
            submitted_at=now - timedelta(minutes=6), test_cases_passed=0, total_test_cases=2, execution_time=50,
        ),
    ])
    return store
