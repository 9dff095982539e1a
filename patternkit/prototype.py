"""Prototype pattern: robots cloned from registered prototypes."""

from __future__ import annotations

import copy
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class RobotType(IntEnum):
    MILITARY = 0
    CIVILIAN = 1


@dataclass
class RobotPrototype(ABC):
    """A robot that can produce copies of itself."""

    serial_number: int = 0

    @property
    @abstractmethod
    def robot_type(self) -> RobotType:
        """The kind of robot this is."""

    def clone(self) -> RobotPrototype:
        """Return an independent copy of this robot."""
        return copy.copy(self)

    def info(self) -> str:
        return f"Robot's serial number: {self.serial_number}"


@dataclass
class CivilianRobot(RobotPrototype):
    name: str = "No Name"
    robot_type: ClassVar[RobotType] = RobotType.CIVILIAN

    def info(self) -> str:
        return (
            f"Concrete Civilian Robot is named {self.name} "
            f"with the serial number {self.serial_number}."
        )


@dataclass
class MilitaryRobot(RobotPrototype):
    rank: str = "No Rank"
    robot_type: ClassVar[RobotType] = RobotType.MILITARY

    def info(self) -> str:
        return (
            f"Concrete Military Robot rank is {self.rank} "
            f"with the serial number {self.serial_number}."
        )


class PrototypeFactory:
    """Holds one prototype per robot type and hands out clones of them."""

    def __init__(self) -> None:
        self._prototypes: dict[RobotType, RobotPrototype] = {
            RobotType.CIVILIAN: CivilianRobot(0, "No Name"),
            RobotType.MILITARY: MilitaryRobot(0, "No Rank"),
        }

    def create_prototype(self, robot_type: RobotType) -> RobotPrototype:
        """Return a fresh clone of the prototype registered for ``robot_type``."""
        try:
            prototype = self._prototypes[robot_type]
        except (KeyError, TypeError):
            raise ValueError(f"no prototype for robot type {robot_type!r}") from None
        return prototype.clone()


def describe_robot_type(robot: object) -> str:
    """Say which kind of robot ``robot`` is."""
    robot_type = getattr(robot, "robot_type", None)
    if robot_type == RobotType.CIVILIAN:
        return f"{robot.serial_number} is a civilian robot"  # type: ignore[attr-defined]
    if robot_type == RobotType.MILITARY:
        return f"{robot.serial_number} is a military robot"  # type: ignore[attr-defined]
    return "This isn't a robot, sorry!"


def main(argv: list[str] | None = None) -> int:
    """Clone robots directly and through the prototype factory."""
    out = sys.stdout
    jim = CivilianRobot(9, "Jim")
    bob = MilitaryRobot(888, "General")
    out.write(describe_robot_type(jim) + "\n")
    out.write(describe_robot_type(bob) + "\n")

    for robot in (MilitaryRobot(123, "Private"), CivilianRobot(321, "Dawn")):
        out.write(robot.info() + "\n")
        out.write(robot.clone().info() + "\n")

    factory = PrototypeFactory()
    for robot_type in (RobotType.MILITARY, RobotType.CIVILIAN):
        out.write(f"Prototype created of type {int(robot_type)}\n")
        out.write(factory.create_prototype(robot_type).info() + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())