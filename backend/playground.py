"""Playground walkthrough for the `User` model.

Builds one user, shows which type its behavior is looked up on, then bumps
the score. Defaults come from `Config` (and therefore from `.env`):

    PLAYGROUND_NAME=Fred PLAYGROUND_SCORE=0 PLAYGROUND_INCREMENTS=1
"""

from __future__ import annotations

from typing import Any, Dict
from config import Config
from util.user import User


# ---------------------------------------------------------------------------
# Inspection helpers
# ---------------------------------------------------------------------------
def describe(user: User) -> Dict[str, Any]:
    """Summarize where a user's behavior lives plus its current state.

    Args:
        user (User): The user to inspect.

    Returns:
        dict: ``type`` name, ``sharedIncrement`` (True when ``increment_score``
        is resolved from the class rather than stored on the instance) and the
        ``user`` payload from ``to_dict``.
    """
    cls = type(user)
    shared = (
        "increment_score" not in vars(user)
        and getattr(cls, "increment_score", None) is User.increment_score
    )
    return {
        "type": cls.__name__,
        "sharedIncrement": shared,
        "user": user.to_dict(),
    }


def run(name: str, score: int, increments: int = 1, verbose: bool = True) -> User:
    """Construct a user and increment its score `increments` times.

    Args:
        name (str): Display name for the user.
        score (int): Starting score.
        increments (int, optional): How many times to call ``increment_score``. Defaults to 1.
        verbose (bool, optional): Print each step. Defaults to True.

    Raises:
        ValueError: If `increments` is negative.

    Returns:
        User: The user after all increments.
    """
    if increments < 0:
        raise ValueError(f"Increment count must be non-negative, got {increments}.")

    user = User(name, score)
    if verbose:
        info = describe(user)
        print(f"Created {info['type']}: {info['user']}")
        print(f"increment_score shared via class: {info['sharedIncrement']}")

    for _ in range(increments):
        user.increment_score()
        if verbose:
            print(f"Incremented score for {user.name} -> {user.score}")

    return user


def main() -> User:
    user = run(
        Config.PLAYGROUND_NAME,
        Config.PLAYGROUND_SCORE,
        Config.PLAYGROUND_INCREMENTS,
        verbose=Config.VERBOSE,
    )
    print(f"Final state: {user.to_dict()}")
    return user


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    main()
