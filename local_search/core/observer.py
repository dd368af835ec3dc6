from abc import ABC, abstractmethod
from typing import List


class Observer(ABC):

    @abstractmethod
    def update(self, subject: "Subject") -> None:
        pass


class Subject:
    """Keeps a list of observers and calls them back on notify()."""

    def __init__(self):
        self._observers: List[Observer] = []

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Removes observer. Raises ValueError if it is not attached."""
        self._observers.remove(observer)

    @property
    def observers(self) -> tuple:
        return tuple(self._observers)

    def notify(self) -> None:
        # Observer failures are not contained: they abort the caller.
        for observer in list(self._observers):
            observer.update(self)
