"""Relaying a container's live log stream to a consumer.

A subscription runs two duties, each on its own daemon thread:

- the producer opens the runtime's follow-mode log stream and pushes every
  chunk into a bounded FIFO queue, blocking while the queue is full;
- the forwarder pops chunks from the queue and hands them to the sink.

The bounded queue is what keeps a slow sink from growing memory: the
producer waits instead of dropping chunks. A subscription ends when the
runtime closes the stream, when the sink goes away, or when it is
cancelled; after that neither duty processes another chunk.
"""

import logging
import queue
import threading
import time
from enum import Enum
from typing import Any, Callable, Optional

from .constants import LOG_CHANNEL_CAPACITY, LOG_PUT_INTERVAL

logger = logging.getLogger(__name__)

LogChunk = bytes
Sink = Callable[[LogChunk], Any]

# Marks the end of the stream in the channel
_EOF = object()


class SinkClosed(Exception):
    """Raised by a sink when its consumer is gone."""

    pass


class LogStreamState(Enum):
    """Lifecycle of a log subscription."""
    IDLE = "idle"
    STREAMING = "streaming"
    ENDED = "ended"
    SINK_CLOSED = "sink_closed"
    CANCELLED = "cancelled"

    @property
    def terminal(self) -> bool:
        return self not in (LogStreamState.IDLE, LogStreamState.STREAMING)


class LogSubscription:
    """One container's log stream flowing into one sink."""

    def __init__(self, runtime, container_id: str, sink: Sink,
                 capacity: int = LOG_CHANNEL_CAPACITY, tail: Any = "all",
                 put_interval: float = LOG_PUT_INTERVAL):
        self.runtime = runtime
        self.container_id = container_id
        self.sink = sink
        self.tail = tail
        self.put_interval = put_interval
        self.delivered = 0

        self._channel: "queue.Queue[Any]" = queue.Queue(maxsize=capacity)
        self._state = LogStreamState.IDLE
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._delivery_lock = threading.RLock()
        self._stream = None
        self._threads = []

    @property
    def state(self) -> LogStreamState:
        return self._state

    @property
    def active(self) -> bool:
        return not self._stopped.is_set()

    def start(self) -> 'LogSubscription':
        """Start the producer and the forwarder; returns immediately."""
        with self._lock:
            if self._state is not LogStreamState.IDLE:
                raise RuntimeError(f"Subscription already {self._state.value}")
            self._state = LogStreamState.STREAMING
        name = f"dockpilot-logs-{self.container_id[:12]}"
        self._threads = [
            threading.Thread(target=self._produce, name=f"{name}-producer", daemon=True),
            threading.Thread(target=self._forward, name=f"{name}-forwarder", daemon=True),
        ]
        for thread in self._threads:
            thread.start()
        return self

    def cancel(self) -> None:
        """Stop streaming. Safe to call at any time, any number of times.

        When this returns no further chunk will reach the sink.
        """
        with self._lock:
            if self._state is LogStreamState.IDLE:
                self._state = LogStreamState.CANCELLED
                self._stopped.set()
                return
        self._finish(LogStreamState.CANCELLED)
        # Wait out a delivery that was already in progress
        with self._delivery_lock:
            pass

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait until both duties have exited. False on timeout."""
        if not self._threads:
            return self._stopped.wait(timeout)
        deadline = None if timeout is None else time.monotonic() + timeout
        for thread in self._threads:
            if deadline is None:
                thread.join()
            else:
                thread.join(max(0.0, deadline - time.monotonic()))
        return not any(thread.is_alive() for thread in self._threads)

    def _finish(self, state: LogStreamState) -> bool:
        """Move to a terminal state once and wake both duties."""
        with self._lock:
            if self._state.terminal:
                return False
            self._state = state
            self._stopped.set()
            stream = self._stream

        if stream is not None:
            self._close_stream(stream)
        self._wake_forwarder()
        logger.debug(f"Log stream for {self.container_id[:12]} {state.value}")
        return True

    def _close_stream(self, stream) -> None:
        close = getattr(stream, "close", None)
        if close is None:
            return
        try:
            close()
        except Exception as e:
            logger.debug(f"Error closing log stream for {self.container_id[:12]}: {e}")

    def _wake_forwarder(self) -> None:
        # Make room for the end marker if the channel is full
        while True:
            try:
                self._channel.put_nowait(_EOF)
                return
            except queue.Full:
                try:
                    self._channel.get_nowait()
                except queue.Empty:
                    pass

    def _put(self, item) -> bool:
        """Blocking put that gives up once the subscription has stopped."""
        while not self._stopped.is_set():
            try:
                self._channel.put(item, timeout=self.put_interval)
                return True
            except queue.Full:
                continue
        return False

    def _produce(self) -> None:
        if self._stopped.is_set():
            return
        try:
            stream = self.runtime.stream_logs(self.container_id, tail=self.tail)
        except Exception as e:
            logger.error(f"Cannot stream logs for {self.container_id[:12]}: {e}")
            self._finish(LogStreamState.ENDED)
            return

        with self._lock:
            self._stream = stream
            stopped = self._stopped.is_set()
        if stopped:
            self._close_stream(stream)
            return

        try:
            for chunk in stream:
                if self._stopped.is_set() or not self._put(chunk):
                    return
        except Exception as e:
            if self._stopped.is_set():
                return
            logger.error(f"Log stream for {self.container_id[:12]} terminated abnormally: {e}")
        # Let the forwarder drain what is queued before the stream counts as ended
        self._put(_EOF)

    def _forward(self) -> None:
        while True:
            chunk = self._channel.get()
            if chunk is _EOF:
                self._finish(LogStreamState.ENDED)
                return

            delivered = False
            with self._delivery_lock:
                if self._stopped.is_set():
                    return
                try:
                    self.sink(chunk)
                    self.delivered += 1
                    delivered = True
                except SinkClosed:
                    pass
                except Exception as e:
                    logger.warning(f"Log sink for {self.container_id[:12]} failed: {e}")

            if not delivered:
                self._finish(LogStreamState.SINK_CLOSED)
                return


class LogStreamRelay:
    """Opens log subscriptions; each one runs on its own pair of threads."""

    def __init__(self, runtime,
                 capacity: int = LOG_CHANNEL_CAPACITY, tail: Any = "all"):
        self.runtime = runtime
        self.capacity = capacity
        self.tail = tail
        self._subscriptions = []
        self._lock = threading.Lock()

    def open(self, container_id: str, sink: Sink) -> LogSubscription:
        """Start streaming a container's logs into ``sink``.

        Never raises for stream errors: a stream that cannot be opened is
        logged and the subscription ends with no chunk delivered.
        """
        subscription = LogSubscription(
            self.runtime, container_id, sink,
            capacity=self.capacity, tail=self.tail,
        )
        with self._lock:
            self._subscriptions = [s for s in self._subscriptions if s.active]
            self._subscriptions.append(subscription)
        return subscription.start()

    def close(self) -> None:
        """Cancel every open subscription."""
        with self._lock:
            subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.cancel()
