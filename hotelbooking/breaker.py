"""A circuit breaker guarding calls to a remote service."""

import enum
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


class State(enum.IntEnum):
    CLOSED = 0
    OPEN = 1
    HALF_OPEN = 2


class TooManyRequestsError(Exception):
    """Raised in the half-open state once max_requests calls were let through."""

    def __init__(self) -> None:
        super().__init__("too many requests")


class OpenStateError(Exception):
    """Raised while the breaker is open."""

    def __init__(self) -> None:
        super().__init__("circuit breaker is open")


@dataclass
class Counts:
    requests: int = 0
    total_successes: int = 0
    total_failures: int = 0
    consecutive_successes: int = 0
    consecutive_failures: int = 0

    def on_request(self) -> None:
        self.requests += 1

    def on_success(self) -> None:
        self.total_successes += 1
        self.consecutive_successes += 1
        self.consecutive_failures = 0

    def on_failure(self) -> None:
        self.total_failures += 1
        self.consecutive_failures += 1
        self.consecutive_successes = 0

    def clear(self) -> None:
        self.requests = 0
        self.total_successes = 0
        self.total_failures = 0
        self.consecutive_successes = 0
        self.consecutive_failures = 0


def default_ready_to_trip(counts: Counts) -> bool:
    """Trip after more than five consecutive failures."""
    return counts.consecutive_failures > 5


class CircuitBreaker:
    """Closed/open/half-open breaker; failures are exceptions raised by the request."""

    def __init__(
        self,
        name: str = "",
        max_requests: int = 0,
        timeout: float = 0.0,
        ready_to_trip: Callable[[Counts], bool] | None = None,
        on_state_change: Callable[[str, State, State], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.name = name
        self.max_requests = max_requests
        self.timeout = timeout or DEFAULT_TIMEOUT
        self._ready_to_trip = ready_to_trip or default_ready_to_trip
        self._on_state_change = on_state_change
        self._clock = clock
        self._state = State.CLOSED
        self._counts = Counts()
        self._expiry: float | None = None

    @property
    def state(self) -> State:
        return self._state

    @property
    def counts(self) -> Counts:
        return Counts(**vars(self._counts))

    def _set_state(self, state: State) -> None:
        if self._state == state:
            return
        previous = self._state
        self._state = state
        if self._on_state_change is not None:
            self._on_state_change(self.name, previous, state)
        self._counts.clear()

    def _trip(self) -> None:
        self._expiry = self._clock() + self.timeout
        self._set_state(State.OPEN)

    def _on_success(self, state: State) -> None:
        if state == State.CLOSED:
            self._counts.on_success()
        elif state == State.HALF_OPEN:
            self._counts.on_success()
            if self._counts.consecutive_successes >= self.max_requests:
                self._set_state(State.CLOSED)

    def _on_failure(self, state: State) -> None:
        if state == State.CLOSED:
            self._counts.on_failure()
            if self._ready_to_trip(Counts(**vars(self._counts))):
                self._trip()
        elif state == State.HALF_OPEN:
            self._trip()

    def execute(self, request: Callable[[], Any]) -> Any:
        """Run request through the breaker, returning its result or re-raising its error."""
        if self._state == State.OPEN and self._expiry is not None and self._expiry < self._clock():
            self._expiry = None
            self._set_state(State.HALF_OPEN)

        if self._state == State.OPEN:
            logger.info("[CIRCUITBREAKER] Response was received from %s", self.name)
            raise OpenStateError()
        if self._state == State.HALF_OPEN and self._counts.requests >= self.max_requests:
            raise TooManyRequestsError()
        self._counts.on_request()

        try:
            result = request()
        except Exception:
            self._on_failure(self._state)
            raise
        self._on_success(self._state)
        return result