"""A last-in, first-out list of cars keyed by plate."""

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

MAXREG = 10
MAX_PLATE_LENGTH = MAXREG - 1


@dataclass
class Car:
    """A car with a registration plate, a price and a model year."""

    plate: str
    price: float = 0.0
    year: int = 0

    def __post_init__(self) -> None:
        if len(self.plate) > MAX_PLATE_LENGTH:
            raise ValueError(f"plate longer than {MAX_PLATE_LENGTH} characters: {self.plate!r}")


class CarList:
    """Stack of cars: the most recently put car is at the front."""

    def __init__(self) -> None:
        self._cars: deque = deque()

    def put(self, car: Car) -> None:
        """Place car at the front of the list."""
        if not isinstance(car, Car):
            raise TypeError("only Car instances can be put in a CarList")
        self._cars.appendleft(car)

    def get(self) -> Optional[Car]:
        """Remove and return the front car, or None if the list is empty."""
        return self._cars.popleft() if self._cars else None

    def apply(self, fn: Callable[[Car], object]) -> None:
        """Call fn on every car, front to back."""
        for car in self._cars:
            fn(car)

    def remove(self, plate: str) -> Optional[Car]:
        """Remove and return the first car with the given plate, or None."""
        for index, car in enumerate(self._cars):
            if car.plate == plate:
                del self._cars[index]
                return car
        return None

    def __len__(self) -> int:
        return len(self._cars)

    def __iter__(self) -> Iterator[Car]:
        return iter(self._cars)