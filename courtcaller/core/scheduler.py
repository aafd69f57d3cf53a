"""Named, cancellable timers owned by a display session."""

from typing import Any, Protocol, TypeVar

from ..utils.logging import log


class Stoppable(Protocol):
    def stop(self) -> Any: ...


TimerT = TypeVar("TimerT", bound=Stoppable)


class TimerRegistry:
    """Tracks every timer a display starts so teardown can stop them all.

    Registering a timer under a name that is already in use stops the old
    one first, which is how one-shot cue timers get restarted.
    """

    def __init__(self):
        self._timers: dict[str, Stoppable] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._timers

    def __len__(self) -> int:
        return len(self._timers)

    @property
    def names(self) -> list[str]:
        return list(self._timers)

    def track(self, name: str, timer: TimerT) -> TimerT:
        self.cancel(name)
        self._timers[name] = timer
        return timer

    def cancel(self, name: str) -> bool:
        timer = self._timers.pop(name, None)
        if timer is None:
            return False
        timer.stop()
        return True

    def release(self, name: str) -> None:
        """Forget a one-shot timer that has already fired"""
        self._timers.pop(name, None)

    def cancel_all(self) -> None:
        names = list(self._timers)
        for name in names:
            self.cancel(name)
        if names:
            log(f"🛑 Cancelled timers: {', '.join(names)}")
