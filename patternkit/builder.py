"""Builder pattern: a director drives a builder that assembles cars."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

DEFAULT_NAME = "N/A"


@dataclass
class Car:
    """The product: a car with a make, a model and the parts built into it."""

    make: str = DEFAULT_NAME
    model: str = DEFAULT_NAME
    parts: list[str] = field(default_factory=list)

    def describe(self) -> str:
        return f"Make: {self.make}\nModel: {self.model}"


class CarBuilder(ABC):
    """Builds the components of a car."""

    @abstractmethod
    def produce_engine(self) -> str:
        """Build the engine."""

    @abstractmethod
    def produce_chassis(self) -> str:
        """Build the chassis."""

    @abstractmethod
    def produce_transmission(self) -> str:
        """Build the transmission."""


class ConcreteCarBuilder(CarBuilder):
    """Builds parts into the car it currently holds."""

    def __init__(self, make: str = DEFAULT_NAME, model: str = DEFAULT_NAME) -> None:
        self.car = Car(make, model)

    def create_car(self, make: str = DEFAULT_NAME, model: str = DEFAULT_NAME) -> None:
        """Start a fresh car."""
        self.car = Car(make, model)

    def produce_engine(self) -> str:
        self.car.parts.append("engine")
        return "Engine Created! -- Car"

    def produce_chassis(self) -> str:
        self.car.parts.append("chassis")
        return "Chassis Created! -- Car"

    def produce_transmission(self) -> str:
        self.car.parts.append("transmission")
        return "Transmission Created! -- Car"

    def take_car(self) -> Car:
        """Hand over the current car and start a fresh default one."""
        result = self.car
        self.create_car()
        return result


class CarDirector:
    """Runs fixed build recipes on a builder."""

    def __init__(self, builder: CarBuilder | None = None) -> None:
        self.builder = builder

    def _builder(self) -> CarBuilder:
        if self.builder is None:
            raise RuntimeError("no builder is set on the director")
        return self.builder

    def build_minimal_viable_car(self) -> list[str]:
        builder = self._builder()
        return [builder.produce_chassis()]

    def build_maximum_viable_car(self) -> list[str]:
        builder = self._builder()
        return [
            builder.produce_engine(),
            builder.produce_transmission(),
            builder.produce_chassis(),
        ]


def _report(title: str, steps: list[str], car: Car) -> None:
    sys.stdout.write(title + "\n")
    for step in steps:
        sys.stdout.write(step + "\n")
    sys.stdout.write(car.describe() + "\n")


def main(argv: list[str] | None = None) -> int:
    """Build seasonal project cars, a hand-built car and a named car."""
    director = CarDirector()

    builder = ConcreteCarBuilder()
    director.builder = builder
    steps = director.build_minimal_viable_car()
    _report("Winter Project Car Built!", steps, builder.take_car())
    steps = director.build_maximum_viable_car()
    _report("Summer Project Car Built!", steps, builder.take_car())

    builder = ConcreteCarBuilder()
    director.builder = builder
    steps = [builder.produce_engine(), builder.produce_chassis()]
    _report("Spring Project Car Built!", steps, builder.take_car())

    builder = ConcreteCarBuilder("Ford", "Mustang")
    director.builder = builder
    steps = director.build_maximum_viable_car()
    _report("Car Built!", steps, builder.take_car())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())