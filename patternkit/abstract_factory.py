"""Abstract factory: race factories that produce soldiers, archers and cavalry."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import ClassVar


class Person(ABC):
    """A unit that can attack and check its health."""

    name: ClassVar[str] = "Person"

    def attack(self) -> str:
        return f"{self.name} Attacked"

    def check_health(self) -> str:
        return f"{self.name} Checked Health"


class Soldier(Person):
    name = "Soldier"


class Archer(Person):
    name = "Archer"


class Cavalry(Person):
    name = "Calvary"


class RaceFactory(ABC):
    """Creates one unit of each kind for a race."""

    name: ClassVar[str] = "Race"

    @abstractmethod
    def make_soldier(self) -> Person:
        """Create a soldier."""

    @abstractmethod
    def make_archer(self) -> Person:
        """Create an archer."""

    @abstractmethod
    def make_cavalry(self) -> Person:
        """Create a cavalry unit."""


class HumanFactory(RaceFactory):
    name = "Human"

    def make_soldier(self) -> Person:
        return Soldier()

    def make_archer(self) -> Person:
        return Archer()

    def make_cavalry(self) -> Person:
        return Cavalry()


class OrcFactory(RaceFactory):
    name = "Orc"

    def make_soldier(self) -> Person:
        return Soldier()

    def make_archer(self) -> Person:
        return Archer()

    def make_cavalry(self) -> Person:
        return Cavalry()


def create_army(factory: RaceFactory) -> list[Person]:
    """Create a soldier, an archer and a cavalry unit with the given factory."""
    return [factory.make_soldier(), factory.make_archer(), factory.make_cavalry()]


def main(argv: list[str] | None = None) -> int:
    """Raise a human army and an orc army and report each unit."""
    for factory in (HumanFactory(), OrcFactory()):
        sys.stdout.write(f"{factory.name} Factory Created\n")
        for unit in create_army(factory):
            sys.stdout.write(f"{unit.name} Created\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())