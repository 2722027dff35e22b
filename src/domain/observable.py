"""
Observable values - Explicit dependency graph for form state.

A ``Slot`` is a mutable input; a ``Derived`` value recomputes from its
sources whenever one of them notifies. Notification is synchronous and
runs subscribers in subscription order.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]


class Observable(Generic[T]):
    """Read-only value with a subscriber list."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Subscriber[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, callback: Subscriber[T]) -> Callable[[], None]:
        """
        Register a callback invoked with every published value.

        Returns:
            A function that removes the subscription (safe to call twice)
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, value: T) -> None:
        self._value = value
        # Copy: callbacks may unsubscribe while we iterate
        for callback in list(self._subscribers):
            callback(value)


class Slot(Observable[T]):
    """Mutable input value. Every set notifies, even when unchanged."""

    def set(self, value: T) -> None:
        self._publish(value)


class Derived(Observable[T]):
    """
    Value computed from other observables.

    Recomputed on every source notification; subscribers are only
    notified when the computed value actually changes.
    """

    def __init__(self, compute: Callable[[], T], *sources: Observable[Any]) -> None:
        super().__init__(compute())
        self._compute = compute
        self._unsubscribers = [source.subscribe(self._on_source_changed) for source in sources]

    def _on_source_changed(self, _value: Any) -> None:
        value = self._compute()
        if value != self._value:
            self._publish(value)

    def dispose(self) -> None:
        """Detach from all sources."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
