"""State pattern: a boss whose replies depend on the current mood."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Mood(ABC):
    """A state of the boss, with a reference back to the boss it belongs to."""

    def __init__(self, boss: Boss | None = None) -> None:
        self.boss = boss

    @abstractmethod
    def help_me(self) -> str:
        """Reply to a request for help."""

    @abstractmethod
    def direct_me(self) -> str:
        """Reply to a request for direction."""


class BadMood(Mood):
    def help_me(self) -> str:
        return "BadMood - Help Me!"

    def direct_me(self) -> str:
        return "BadMood - Direct Me!"


class OkMood(Mood):
    def help_me(self) -> str:
        return "OkMood - Help Me!"

    def direct_me(self) -> str:
        return "OkMood - Direct Me!"


class GoodMood(Mood):
    def help_me(self) -> str:
        return "GoodMood - Help Me!"

    def direct_me(self) -> str:
        return "GoodMood - Direct Me!"


class Boss:
    """The context: hands every request to its current mood."""

    def __init__(self, mood: Mood | None = None) -> None:
        self.mood: Mood | None = None
        if mood is not None:
            self.transition_to(mood)

    def transition_to(self, mood: Mood) -> None:
        """Replace the current mood with a new one."""
        mood.boss = self
        self.mood = mood

    def _current(self) -> Mood:
        if self.mood is None:
            raise RuntimeError("the boss has no mood set")
        return self.mood

    def help_me(self) -> str:
        return self._current().help_me()

    def direct_me(self) -> str:
        return self._current().direct_me()


def main(argv: list[str] | None = None) -> int:
    """Ask the boss for help and direction through three moods."""
    boss = Boss(OkMood())
    for mood in (None, BadMood(), GoodMood()):
        if mood is not None:
            boss.transition_to(mood)
        sys.stdout.write(boss.help_me() + "\n")
        sys.stdout.write(boss.direct_me() + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())