from __future__ import annotations
from dataclasses import dataclass, field
from codesync.models.user import User
from codesync.models.contest import Contest, Problem
from codesync.models.submission import Submission


@dataclass
class Store:
    """Process-local collections backing the API. Nothing here survives a restart."""

    users: list[User] = field(default_factory=list)
    contests: list[Contest] = field(default_factory=list)
    problems: list[Problem] = field(default_factory=list)
    submissions: list[Submission] = field(default_factory=list)

    def get_user(self, user_id: str) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email: str) -> User | None:
        email = email.lower()
        return next((u for u in self.users if u.email.lower() == email), None)

    def get_contest(self, contest_id: str) -> Contest | None:
        return next((c for c in self.contests if c.id == contest_id), None)

    def get_problem(self, problem_id: str) -> Problem | None:
        return next((p for p in self.problems if p.id == problem_id), None)

    def problems_for(self, contest_id: str) -> list[Problem]:
        return [p for p in self.problems if p.contest_id == contest_id]

    def submissions_for(self, contest_id: str, user_id: str | None = None) -> list[Submission]:
        return [
            s for s in self.submissions
            if s.contest_id == contest_id and (user_id is None or s.user_id == user_id)
        ]


store = Store()


def reset_store(seed: bool = False) -> Store:
    """Empty the shared store in place, optionally re-seeding the demo data."""
    store.users.clear()
    store.contests.clear()
    store.problems.clear()
    store.submissions.clear()
    if seed:
        from codesync.seed import seed_demo_data
        seed_demo_data(store)
    return store


async def get_store() -> Store:
    return store
