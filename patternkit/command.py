"""Command pattern: a remote that sends commands to a TV."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass

MIN_VOLUME = 0
MAX_VOLUME = 10
MIN_CHANNEL = 0
MAX_CHANNEL = 100


@dataclass
class TV:
    """The receiver: each operation changes the set and returns what happened."""

    is_powered: bool = False
    channel: int = 0
    volume: int = 0

    def power_on(self) -> str:
        if self.is_powered:
            return "TV is ALREADY powered on!"
        self.is_powered = True
        return "TV is powered on!"

    def power_off(self) -> str:
        if self.is_powered:
            self.is_powered = False
            return "TV is powered off!"
        return "TV is already off!"

    def volume_up(self) -> str:
        if not self.is_powered:
            return "Can change volume -- TV is powered off!"
        if self.volume < MAX_VOLUME:
            self.volume += 1
            return "TV volumed up!"
        self.volume = MAX_VOLUME
        return "TV can't increase volume! Volume at it's highest"

    def volume_down(self) -> str:
        if not self.is_powered:
            return "TV not powered -- can't decrease volume!"
        if self.volume > MIN_VOLUME:
            self.volume -= 1
            return "TV volumed down!"
        self.volume = MIN_VOLUME
        return "TV can't decrease volume! Volume at it's lowest"

    def channel_up(self) -> str:
        if not self.is_powered:
            return "TV not powered -- can't increase the channel!"
        if self.channel < MAX_CHANNEL:
            self.channel += 1
            return "TV channeled up!"
        self.channel = MAX_CHANNEL
        return "TV can't increase channel! Channel at it's highest"

    def channel_down(self) -> str:
        if not self.is_powered:
            return "TV not powered -- can't decrease the channel!"
        if self.channel > MIN_CHANNEL:
            self.channel -= 1
            return "TV channeled down!"
        self.channel = MIN_CHANNEL
        return "TV can't decrease channel! Channel at it's lowest"


@dataclass
class TVCommand(ABC):
    """A request bound to the TV that carries it out."""

    tv: TV

    @abstractmethod
    def execute(self) -> str:
        """Carry out the request and return the TV's response."""


class PowerOn(TVCommand):
    def execute(self) -> str:
        return self.tv.power_on()


class PowerOff(TVCommand):
    def execute(self) -> str:
        return self.tv.power_off()


class VolumeUp(TVCommand):
    def execute(self) -> str:
        return self.tv.volume_up()


class VolumeDown(TVCommand):
    def execute(self) -> str:
        return self.tv.volume_down()


class ChannelUp(TVCommand):
    def execute(self) -> str:
        return self.tv.channel_up()


class ChannelDown(TVCommand):
    def execute(self) -> str:
        return self.tv.channel_down()


class TVRemote:
    """The invoker: holds one command and runs it when pressed."""

    def __init__(self, command: TVCommand | None = None) -> None:
        self.command = command

    def set_command(self, command: TVCommand) -> None:
        self.command = command

    def press(self) -> str:
        if self.command is None:
            raise RuntimeError("no command is set on the remote")
        return self.command.execute()


def main(argv: list[str] | None = None) -> int:
    """Run a short session of remote commands against one TV."""
    tv = TV()
    remote = TVRemote()
    for command_type in (PowerOn, VolumeUp, VolumeDown, ChannelUp, ChannelDown, PowerOff):
        remote.set_command(command_type(tv))
        sys.stdout.write(remote.press() + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())