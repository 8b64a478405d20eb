"""Multi-producer, single-consumer channel between workers and the aggregator."""

import logging
import queue
import threading
from typing import Generic, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Finished:
    """Marker a producer puts on the channel when it has no more items."""

    def __repr__(self) -> str:
        return "FINISHED"


FINISHED = _Finished()


class ResultChannel(Generic[T]):
    """Fan-in queue carrying trial records to a single consumer.

    Producers ``send`` items and call ``finish`` once when done. The
    consumer ``receive``s until it has seen one ``FINISHED`` per producer,
    and may ``close`` the channel early, after which sends are dropped.
    """

    def __init__(self, maxsize: int = 0):
        self._queue: "queue.Queue[Union[T, _Finished]]" = queue.Queue(maxsize)
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, item: T) -> bool:
        """Queue an item. Returns False if the consumer has gone away.

        The closed check and the put are not atomic: an item sent while
        ``close`` drains may stay queued until ``close`` is called again.
        """
        if self._closed.is_set():
            logger.debug("Dropped %r, channel is closed", item)
            return False
        self._queue.put(item)
        return True

    def finish(self) -> None:
        """Tell the consumer this producer is done."""
        self._queue.put(FINISHED)

    def receive(self, timeout: Optional[float] = None) -> Union[T, _Finished]:
        """Wait up to ``timeout`` seconds for the next item.

        Raises:
            queue.Empty: Nothing arrived in time.
        """
        return self._queue.get(timeout=timeout)

    def close(self) -> None:
        """Stop accepting items and discard whatever is still queued."""
        self._closed.set()
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break
