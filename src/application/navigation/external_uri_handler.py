from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

UriListener = Callable[[str], None]


class ExternalUriHandler:
    """Single-slot mailbox for deep links coming from outside the UI.

    A URI that arrives while no listener is attached is kept until one is
    set. Only the most recent URI is kept.
    """

    def __init__(self) -> None:
        self._cached: Optional[str] = None
        self._listener: Optional[UriListener] = None

    @property
    def pending_uri(self) -> Optional[str]:
        return self._cached

    @property
    def listener(self) -> Optional[UriListener]:
        return self._listener

    @listener.setter
    def listener(self, value: Optional[UriListener]) -> None:
        self._listener = value
        if value is not None and self._cached is not None:
            uri = self._cached
            self._cached = None
            logger.debug("Delivering cached deep link %s", uri)
            value(uri)

    def on_new_uri(self, uri: str) -> None:
        if self._cached is not None and self._listener is None:
            logger.debug("Dropping undelivered deep link %s", self._cached)
        self._cached = uri
        listener = self._listener
        if listener is not None:
            self._cached = None
            listener(uri)
        else:
            logger.info("Buffered deep link %s", uri)
