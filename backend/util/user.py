"""User model: a named score that only moves up by one."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(eq=False)
class User:
    """Minimal in‑memory user model.

    Every instance shares the single ``increment_score`` defined on the class;
    nothing is copied per instance. Equality is identity, so two users built
    from the same values remain distinct entities.
    """
    name: str
    score: int

    def increment_score(self) -> None:
        """Increment score by one."""
        self.score += 1

    def to_dict(self) -> dict:
        """Convert the user to a dictionary for serialization.

        Returns:
            dict: ``{"name": str, "score": int}``.
        """
        return {"name": self.name, "score": self.score}
