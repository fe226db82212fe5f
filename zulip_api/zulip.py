"""Entry point bundling the domain clients around one configuration."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from functools import cached_property
from typing import Any, TypeVar

from zulip_api.adapters.transport import HttpTransport
from zulip_api.config import Config
from zulip_api.services.events import Events
from zulip_api.services.messages import Messages
from zulip_api.services.streams import Streams
from zulip_api.services.users import Users

T = TypeVar("T")

Callback = Callable[[Any, BaseException | None], None]


class Zulip:
    """Lazily build the domain clients and dispatch calls in the background.

    Every client method is synchronous and raises on failure. :meth:`submit`
    runs one on a worker thread instead and completes exactly once, either
    with the result or with the raised error.
    """

    def __init__(
        self,
        config: Config,
        *,
        transport: HttpTransport | None = None,
        logger: Any | None = None,
        max_workers: int = 4,
    ) -> None:
        self._config = config
        self._logger = logger or logging.getLogger("zulip_api")
        self._transport = transport or HttpTransport(timeout=config.timeout, logger=self._logger)
        self._max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None
        self._executor_lock = threading.Lock()

    @property
    def config(self) -> Config:
        return self._config

    @cached_property
    def messages(self) -> Messages:
        return Messages(self._config, transport=self._transport, logger=self._logger)

    @cached_property
    def streams(self) -> Streams:
        return Streams(self._config, transport=self._transport, logger=self._logger)

    @cached_property
    def users(self) -> Users:
        return Users(self._config, transport=self._transport, logger=self._logger)

    @cached_property
    def events(self) -> Events:
        return Events(self._config, transport=self._transport, logger=self._logger)

    def submit(
        self,
        operation: Callable[..., T],
        *args: Any,
        callback: Callback | None = None,
        **kwargs: Any,
    ) -> Future[T]:
        """Run ``operation(*args, **kwargs)`` on a worker thread.

        ``callback(result, error)`` is invoked once from the worker thread,
        with ``error`` set to ``None`` on success. A call cancelled before it
        started reports a ``CancelledError`` from the thread that cancelled it.
        """

        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="zulip-api",
                )
            executor = self._executor

        if callback is None:
            return executor.submit(operation, *args, **kwargs)

        future = executor.submit(self._run_with_callback, callback, operation, args, kwargs)
        future.add_done_callback(self._cancellation_handler(callback))
        return future

    def _run_with_callback(
        self,
        callback: Callback,
        operation: Callable[..., T],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> T:
        try:
            result = operation(*args, **kwargs)
        except Exception as exc:
            self._notify(callback, None, exc)
            raise

        self._notify(callback, result, None)
        return result

    def _cancellation_handler(self, callback: Callback) -> Callable[[Future[Any]], None]:
        # Only reached for calls that never started; the worker reports the rest.
        def _done(future: Future[Any]) -> None:
            if future.cancelled():
                self._notify(callback, None, CancelledError())

        return _done

    def _notify(self, callback: Callback, result: Any, error: BaseException | None) -> None:
        try:
            callback(result, error)
        except Exception:
            self._logger.error("Zulip callback raised", exc_info=True)

    def close(self) -> None:
        """Wait for pending calls and release the worker threads."""

        with self._executor_lock:
            executor, self._executor = self._executor, None

        if executor is not None:
            executor.shutdown(wait=True)

    def __enter__(self) -> Zulip:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()
