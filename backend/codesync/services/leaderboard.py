from __future__ import annotations
from typing import Iterable
from codesync.models.submission import Submission
from codesync.schemas.submission import LeaderboardRow


def build_leaderboard(submissions: Iterable[Submission]) -> list[LeaderboardRow]:
    # per user: summed score, summed time, number of accepted submissions
    agg: dict[str, dict] = {}
    for s in submissions:
        row = agg.setdefault(s.user_id, {
            "user_id": s.user_id, "username": s.username,
            "total_score": 0, "total_time": 0, "problems_solved": 0,
        })
        row["total_score"] += s.score or 0
        row["total_time"] += s.time_taken or 0
        if s.status == "accepted":
            row["problems_solved"] += 1

    # sorted() is stable, so full ties keep first-submission order
    ordered = sorted(agg.values(), key=lambda r: (-r["total_score"], r["total_time"]))
    return [LeaderboardRow(rank=i, **r) for i, r in enumerate(ordered, start=1)]
