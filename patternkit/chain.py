"""Chain of responsibility: handlers that assemble parts of a robot."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import ClassVar

ASSEMBLY_INSTRUCTIONS: tuple[str, ...] = (
    "Chest",
    "Pelvis",
    "Right Arm",
    "Left Arm",
    "Right Leg",
    "Left Leg",
    "Cranium",
)


class Handler(ABC):
    """Something that can take a request or hand it along the chain."""

    @abstractmethod
    def set_next(self, handler: Handler) -> Handler:
        """Link the handler that receives requests this one does not take."""

    @abstractmethod
    def handle(self, request: str) -> str:
        """Handle a request and return the result text."""


class BaseHandler(Handler):
    """Passes every request to the next handler; returns '' at the end of the chain."""

    def __init__(self, next_handler: Handler | None = None) -> None:
        self.next_handler = next_handler

    def set_next(self, handler: Handler) -> Handler:
        self.next_handler = handler
        return handler

    def handle(self, request: str) -> str:
        if self.next_handler is not None:
            return self.next_handler.handle(request)
        return ""


class _PartHandler(BaseHandler):
    # request -> (attribute flagging the part as available, result message)
    _PARTS: ClassVar[dict[str, tuple[str, str]]] = {}

    def handle(self, request: str) -> str:
        part = self._PARTS.get(request)
        if part is not None:
            attribute, message = part
            if getattr(self, attribute):
                setattr(self, attribute, False)
                return message
        return super().handle(request)


class RobotBodyHandler(_PartHandler):
    """Assembles the chest and pelvis, each once."""

    _PARTS = {
        "Chest": ("has_chest", "Robot's chest assembled!"),
        "Pelvis": ("has_pelvis", "Robot's pelvis assembled!"),
    }

    def __init__(self, has_chest: bool = False, has_pelvis: bool = False) -> None:
        super().__init__()
        self.has_chest = has_chest
        self.has_pelvis = has_pelvis

    def handle(self, request: str) -> str:
        return super().handle(request)


class RobotLimbHandler(_PartHandler):
    """Assembles the arms and legs, each once."""

    _PARTS = {
        "Right Arm": ("has_right_arm", "Robot's right arm assembled!"),
        "Left Arm": ("has_left_arm", "Robot's left arm assembled!"),
        "Right Leg": ("has_right_leg", "Robot's right leg assembled!"),
        "Left Leg": ("has_left_leg", "Robot's left leg assembled!"),
    }

    def __init__(
        self,
        has_right_arm: bool = False,
        has_left_arm: bool = False,
        has_right_leg: bool = False,
        has_left_leg: bool = False,
    ) -> None:
        super().__init__()
        self.has_right_arm = has_right_arm
        self.has_left_arm = has_left_arm
        self.has_right_leg = has_right_leg
        self.has_left_leg = has_left_leg

    def handle(self, request: str) -> str:
        return super().handle(request)


class RobotCraniumHandler(_PartHandler):
    """Assembles the cranium once."""

    _PARTS = {
        "Cranium": ("has_cranium", "Robot's cranium assembled!"),
    }

    def __init__(self, has_cranium: bool = False) -> None:
        super().__init__()
        self.has_cranium = has_cranium

    def handle(self, request: str) -> str:
        return super().handle(request)


def handle_the_chain(handler: Handler) -> list[str]:
    """Request every part of a complete robot and return the results in order."""
    return [handler.handle(request) for request in ASSEMBLY_INSTRUCTIONS]


def main(argv: list[str] | None = None) -> int:
    """Assemble one robot through a body, limb and cranium chain."""
    body = RobotBodyHandler(True, True)
    limbs = RobotLimbHandler(True, True, True, True)
    cranium = RobotCraniumHandler(True)
    body.set_next(limbs).set_next(cranium)

    for result in handle_the_chain(body):
        sys.stdout.write(result + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())