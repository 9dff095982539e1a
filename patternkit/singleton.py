"""Singleton pattern: one shared object holding global system settings."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Callable, ClassVar


class SystemState(IntEnum):
    STANDARD_MODE = 0
    CALIBRATION_MODE = 1
    MAINTENANCE_MODE = 2
    IDLE_MODE = 3


_CREATE_TOKEN = object()


class Globals:
    """System-wide settings; obtain the one instance with ``get_instance``."""

    _instance: ClassVar[Globals | None] = None

    def __init__(
        self,
        _token: object = None,
        *,
        system_state: SystemState = SystemState.STANDARD_MODE,
        number_of_files: int = 0,
    ) -> None:
        if _token is not _CREATE_TOKEN:
            raise TypeError("Globals cannot be created directly; use Globals.get_instance()")
        self.system_state = system_state
        self.number_of_files = number_of_files

    @classmethod
    def get_instance(cls) -> Globals:
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls(_CREATE_TOKEN)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so the next request creates a fresh one."""
        cls._instance = None

    def __copy__(self) -> Globals:
        # Copying never yields a second instance: the shared object is returned.
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Globals:
        memo[id(self)] = self
        return self

    def __reduce__(self) -> tuple[Callable[[], Globals], tuple[()]]:
        # Unpickling resolves to the shared instance rather than a new one.
        return (type(self).get_instance, ())


def describe_globals(globals_: Globals) -> str:
    """Return the settings held by ``globals_`` as two lines of text."""
    return (
        f"System State: {int(globals_.system_state)}\n"
        f"Number of Files: {globals_.number_of_files}"
    )


def main(argv: list[str] | None = None) -> int:
    """Change the shared settings and show that a second lookup sees them."""
    settings = Globals.get_instance()
    sys.stdout.write(describe_globals(settings) + "\n")

    settings.number_of_files = 3
    settings.system_state = SystemState.CALIBRATION_MODE
    sys.stdout.write(describe_globals(settings) + "\n")

    other = Globals.get_instance()
    sys.stdout.write(describe_globals(other) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())