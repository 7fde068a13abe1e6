"""
Request state for a single remote collection.

`ResourceState` owns every call made against the collection endpoint:
the initial read, create/delete mutations and the refresh read that
follows each mutation. The Streamlit page keeps one instance per browser
session in `st.session_state` and calls `sync()` on every script run.

Mutations are requested through `request_mutation()`, which only queues a
one-shot command. Commands run in FIFO order on the next `sync()` and are
discarded once executed, so a rerun never repeats a request.
"""

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Optional

import requests

from api.products import create_product, delete_product, list_products
from config import LOADING_WINDOW_SECONDS, MUTATION_ERROR_MESSAGE, READ_ERROR_MESSAGE

logger = logging.getLogger("catalog.state")

CREATE = "POST"
DELETE = "DELETE"

# Failures that count as "the backend call did not work"
REQUEST_ERRORS = (requests.RequestException, ValueError)


@dataclass(frozen=True)
class MutationCommand:
    method: str
    payload: Optional[dict] = None
    item_id: Any = None


class ResourceState:
    def __init__(
        self,
        url: str,
        session: Optional[requests.Session] = None,
        loading_window: float = LOADING_WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.url = url
        self.session = session if session is not None else requests.Session()
        self.loading_window = loading_window
        self.clock = clock
        self.sleep = sleep

        self.data = None
        self.error: Optional[str] = None
        self.last_result = None

        self._pending: Deque[MutationCommand] = deque()
        self._activated = False
        self._reading = False
        self._loading_until: Optional[float] = None

    # ---------------- Exposed state ----------------
    @property
    def loading(self) -> bool:
        return self._reading or self.loading_remaining > 0

    @property
    def loading_remaining(self) -> float:
        """Seconds left in the loading window, 0 once it has closed."""
        if self._loading_until is None:
            return 0.0
        return max(0.0, self._loading_until - self.clock())

    def wait_for_loading_window(self) -> None:
        remaining = self.loading_remaining
        if remaining > 0:
            self.sleep(remaining)

    @property
    def pending(self) -> int:
        return len(self._pending)

    # ---------------- Trigger ----------------
    def request_mutation(self, data, method: str) -> MutationCommand:
        """
        Queue a create (`POST`, data is the product payload) or a
        delete (`DELETE`, data is the product id). Nothing is sent until
        the next `sync()`.
        """
        if method == CREATE:
            command = MutationCommand(method=CREATE, payload=dict(data))
        elif method == DELETE:
            command = MutationCommand(method=DELETE, item_id=data)
        else:
            raise ValueError(f"Unsupported method: {method!r}")

        self._pending.append(command)
        logger.info("Queued %s request (%d pending)", method, len(self._pending))
        return command

    # ---------------- Execution ----------------
    def sync(self) -> None:
        """Run the first read, then every queued mutation and its refresh."""
        if not self._activated:
            self._activated = True
            self.refresh()

        while self._pending:
            command = self._pending.popleft()
            if self._execute(command):
                self.refresh()

    def refresh(self) -> None:
        self._reading = True
        try:
            self.data = list_products(self.url, session=self.session)
            self.error = None
        except REQUEST_ERRORS as e:
            logger.warning("Failed to load %s: %s", self.url, e)
            self.error = READ_ERROR_MESSAGE
        finally:
            self._reading = False
            self._loading_until = self.clock() + self.loading_window

    def _execute(self, command: MutationCommand) -> bool:
        try:
            if command.method == CREATE:
                result = create_product(self.url, command.payload, session=self.session)
            else:
                result = delete_product(self.url, command.item_id, session=self.session)
        except REQUEST_ERRORS as e:
            logger.warning("%s request against %s failed: %s", command.method, self.url, e)
            self.error = MUTATION_ERROR_MESSAGE
            return False

        self.last_result = result
        return True
