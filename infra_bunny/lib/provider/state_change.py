import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

RefreshFunc = Callable[[], tuple[Any, str]]


class StateChangeError(Exception):
    pass


class StateChangeTimeoutError(StateChangeError):
    def __init__(self, last_state: str, timeout: float):
        super().__init__(f"timeout while waiting for state to become {last_state!r} (timeout: {timeout}s)")
        self.last_state = last_state
        self.timeout = timeout


class StateChangeCancelledError(StateChangeError):
    def __init__(self):
        super().__init__("waiting for state change was cancelled")


class UnexpectedStateError(StateChangeError):
    def __init__(self, state: str, expected: list[str]):
        super().__init__(f"unexpected state {state!r}, wanted one of {expected}")
        self.state = state


@dataclass
class StateChangeConf:
    """
    Poll a refresh function until it reports a target state.

    ``refresh`` returns ``(result, state)``. Exceptions raised by it abort the wait and propagate. While the state is
    one of ``pending``, ``refresh`` is called again after ``min_interval`` seconds until ``timeout`` seconds have passed.

    ``clock`` and ``sleep`` can be replaced, ``cancel`` aborts the wait before the next refresh once it is set.
    """

    refresh: RefreshFunc
    pending: list[str]
    target: list[str]
    timeout: float
    min_interval: float = 5.0
    clock: Callable[[], float] = time.monotonic
    sleep: Optional[Callable[[float], None]] = None
    cancel: Optional[threading.Event] = None

    def _sleep(self, seconds: float) -> None:
        if self.sleep is not None:
            self.sleep(seconds)
        elif self.cancel is not None:
            self.cancel.wait(seconds)
        else:
            time.sleep(seconds)

    def _check_cancelled(self) -> None:
        if self.cancel is not None and self.cancel.is_set():
            raise StateChangeCancelledError()

    def wait(self) -> Any:
        """Block until the target state is reached

        :return: The result of the refresh call that reported the target state
        :raises StateChangeTimeoutError: The deadline passed while the state was pending
        :raises StateChangeCancelledError: The cancel event was set
        :raises UnexpectedStateError: ``refresh`` reported a state that is neither pending nor a target
        """
        deadline = self.clock() + self.timeout

        while True:
            self._check_cancelled()

            result, state = self.refresh()

            if state in self.target:
                return result
            if state not in self.pending:
                raise UnexpectedStateError(state, self.pending + self.target)

            remaining = deadline - self.clock()
            if remaining <= 0:
                raise StateChangeTimeoutError(self.target[0], self.timeout)

            logger.debug("state is %r, refreshing again in %ss", state, min(self.min_interval, remaining))
            self._sleep(min(self.min_interval, remaining))
