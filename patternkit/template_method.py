"""Template method: tea and coffee makers sharing one brewing procedure."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar

MIN_AMOUNT = 0
MAX_EXTRAS_AMOUNT = 15
MAX_BEVERAGE_AMOUNT = 30
MAX_CUPS = 60
MAX_WATER_AMOUNT = 600.0
BEVERAGE_WATER = 8


@dataclass
class Extras:
    """Stock of shots that can be added to a drink."""

    sugar_shot: int = MAX_EXTRAS_AMOUNT
    cream_shot: int = MAX_EXTRAS_AMOUNT
    milk_shot: int = MAX_EXTRAS_AMOUNT
    chocolate_shot: int = MAX_EXTRAS_AMOUNT


@dataclass
class Teas:
    """Stock of tea portions."""

    green_tea: int = MAX_BEVERAGE_AMOUNT
    black_tea: int = MAX_BEVERAGE_AMOUNT
    chia_tea: int = MAX_BEVERAGE_AMOUNT


@dataclass
class Coffees:
    """Stock of coffee portions."""

    light_roast: int = MAX_BEVERAGE_AMOUNT
    medium_roast: int = MAX_BEVERAGE_AMOUNT
    dark_roast: int = MAX_BEVERAGE_AMOUNT


class BeverageMaker(ABC):
    """A machine that owns copies of its stock and brews by a fixed procedure."""

    def __init__(
        self,
        extras: Extras | None = None,
        teas: Teas | None = None,
        coffees: Coffees | None = None,
        cups: int = MAX_CUPS,
        water_amount: float = MAX_WATER_AMOUNT,
    ) -> None:
        self.extras = replace(extras) if extras is not None else Extras()
        self.teas = replace(teas) if teas is not None else None
        self.coffees = replace(coffees) if coffees is not None else None
        self._cups = cups
        self._water_amount = water_amount

    @property
    def cups(self) -> int:
        return self._cups

    @cups.setter
    def cups(self, value: int) -> None:
        # the count never drops to zero or below
        if value > 0:
            self._cups = value

    @property
    def water_amount(self) -> float:
        """Water left, in fluid ounces."""
        return self._water_amount

    @water_amount.setter
    def water_amount(self, value: float) -> None:
        if value > 0:
            self._water_amount = value

    def make_beverage(self, beverage: str) -> list[str]:
        """Run the brewing procedure and return the step messages in order."""
        return [
            self.place_cup(),
            self.boil_water(),
            self.brew(beverage),
            self.pour_in_cup(),
            self.add_extras(),
        ]

    def place_cup(self) -> str:
        self.cups -= 1
        return "Cup placed"

    def boil_water(self) -> str:
        return "Water boiled"

    @abstractmethod
    def brew(self, beverage: str) -> str:
        """Use one portion of the selected beverage."""

    def pour_in_cup(self) -> str:
        self.water_amount -= BEVERAGE_WATER
        return "Beverage poured in cup"

    @abstractmethod
    def add_extras(self) -> str:
        """Add the extras this machine offers."""

    def restock_extras(self) -> str:
        self.extras = Extras()
        return "Restocked extras"

    def restock_teas(self) -> str:
        if self.teas is None:
            raise RuntimeError("this machine holds no teas")
        self.teas = Teas()
        return "Restocked teas"

    def restock_coffees(self) -> str:
        if self.coffees is None:
            raise RuntimeError("this machine holds no coffees")
        self.coffees = Coffees()
        return "Restocked coffees"

    def restock_cups(self) -> None:
        self.cups = MAX_CUPS

    def restock_water(self) -> None:
        self.water_amount = MAX_WATER_AMOUNT


def _use_portion(stock: object | None, field: str | None, kind: str) -> None:
    if field is None:
        return
    if stock is None:
        raise RuntimeError(f"this machine holds no {kind}")
    setattr(stock, field, getattr(stock, field) - 1)


class TeaMaker(BeverageMaker):
    """Makes only teas."""

    _BEVERAGES: ClassVar[dict[str, str]] = {
        "green tea": "green_tea",
        "black tea": "black_tea",
        "chia tea": "chia_tea",
    }

    def __init__(
        self,
        extras: Extras | None = None,
        teas: Teas | None = None,
        cups: int = MAX_CUPS,
        water_amount: float = MAX_WATER_AMOUNT,
    ) -> None:
        super().__init__(extras, teas if teas is not None else Teas(), None, cups, water_amount)

    def brew(self, beverage: str) -> str:
        _use_portion(self.teas, self._BEVERAGES.get(beverage), "teas")
        return "Brewing tea"

    def add_extras(self) -> str:
        return "Tea extras added"


class CoffeeMaker(BeverageMaker):
    """Makes only coffees."""

    _BEVERAGES: ClassVar[dict[str, str]] = {
        "light roast": "light_roast",
        "medium roast": "medium_roast",
        "dark roast": "dark_roast",
    }

    def __init__(
        self,
        extras: Extras | None = None,
        coffees: Coffees | None = None,
        cups: int = MAX_CUPS,
        water_amount: float = MAX_WATER_AMOUNT,
    ) -> None:
        super().__init__(
            extras, None, coffees if coffees is not None else Coffees(), cups, water_amount
        )

    def brew(self, beverage: str) -> str:
        _use_portion(self.coffees, self._BEVERAGES.get(beverage), "coffees")
        return "Brewing coffee"

    def add_extras(self) -> str:
        return "Coffee extras added"


def refill_machine(maker: BeverageMaker) -> BeverageMaker:
    """Restock everything the machine holds and return it."""
    if maker.teas is not None:
        maker.restock_teas()
    if maker.coffees is not None:
        maker.restock_coffees()
    maker.restock_extras()
    maker.restock_cups()
    maker.restock_water()
    return maker


def main(argv: list[str] | None = None) -> int:
    """Brew three teas and three coffees, then refill both machines."""
    tea_maker = TeaMaker(Extras(), Teas())
    coffee_maker = CoffeeMaker(Extras(), Coffees())
    orders = (
        (tea_maker, ("green tea", "black tea", "chia tea")),
        (coffee_maker, ("light roast", "medium roast", "dark roast")),
    )
    for maker, beverages in orders:
        for beverage in beverages:
            for step in maker.make_beverage(beverage):
                sys.stdout.write(step + "\n")
    for maker in (tea_maker, coffee_maker):
        refill_machine(maker)
        sys.stdout.write(f"{type(maker).__name__} refilled\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())