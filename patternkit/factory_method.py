"""Factory method: creators that decide which farm animal to make."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import ClassVar


class Animal(ABC):
    """A farm animal, optionally with a name."""

    kind: ClassVar[str] = "animal"
    _sound: ClassVar[str] = ""
    _counting: ClassVar[str] = ""
    _food: ClassVar[str] = ""

    def __init__(self, name: str | None = None) -> None:
        self.name = name

    def introduce(self) -> str:
        """Return the line the animal says when it is created."""
        if self.name is None:
            return f"I'm a {self.kind}!"
        return f"I'm a {self.kind}, and my name is {self.name}!"

    @abstractmethod
    def sound(self) -> str:
        """Return the sound this animal makes."""

    def sleeps(self) -> str:
        return self._counting

    def eats(self) -> str:
        return self._food


class Cow(Animal):
    kind = "cow"
    _counting = "zzZZzz. Counting cows."
    _food = "Starts to eat hay."

    def sound(self) -> str:
        return "Moo!"


class Sheep(Animal):
    kind = "sheep"
    _counting = "zzZZzz. Counting Sheep."
    _food = "Starts to eat grass."

    def sound(self) -> str:
        return "Baa!"


class Pig(Animal):
    kind = "pig"
    _counting = "zzZZZzz. Counting pigs."
    _food = "Starts to eat slop."

    def sound(self) -> str:
        return "Oink!"


class AnimalCreator(ABC):
    """Creates animals through a factory method that subclasses provide."""

    @abstractmethod
    def factory_method(self, name: str | None = None) -> Animal:
        """Make a new animal of the creator's kind."""

    def create_animal(self, name: str | None = None) -> Animal:
        """Create an animal by way of the factory method."""
        return self.factory_method(name)


class CowCreator(AnimalCreator):
    def factory_method(self, name: str | None = None) -> Animal:
        return Cow(name)


class SheepCreator(AnimalCreator):
    def factory_method(self, name: str | None = None) -> Animal:
        return Sheep(name)


class PigCreator(AnimalCreator):
    def factory_method(self, name: str | None = None) -> Animal:
        return Pig(name)


_CREATORS: tuple[type[AnimalCreator], ...] = (CowCreator, SheepCreator, PigCreator)


def create_one_of_each(names: Sequence[str] | None = None) -> list[Animal]:
    """Create a cow, a sheep and a pig, named in that order if names are given."""
    if names is None:
        return [creator().create_animal() for creator in _CREATORS]
    if len(names) != len(_CREATORS):
        raise ValueError(f"expected {len(_CREATORS)} names, got {len(names)}")
    return [creator().create_animal(name) for creator, name in zip(_CREATORS, names)]


def animal_sounds(animals: Iterable[Animal]) -> list[str]:
    """Return the sound of each animal in order."""
    return [animal.sound() for animal in animals]


def main(argv: list[str] | None = None) -> int:
    """Create one of each animal, without and with names, and print their sounds."""
    for names in (None, ("Daisy", "Grant", "Luigi")):
        animals = create_one_of_each(names)
        for animal in animals:
            sys.stdout.write(animal.introduce() + "\n")
        for sound in animal_sounds(animals):
            sys.stdout.write(sound + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())