"""
Signal Wiring
=============

Routes SIGINT / SIGTERM to a playback cancellation callback.

Handlers are installed on the event loop where the platform allows it,
otherwise through signal.signal with a thread-safe hop into the loop.
Previous handlers are restored afterwards.
"""

import asyncio
import logging
import signal
from typing import Any, Callable, Dict, List, Optional, Tuple


logger = logging.getLogger(__name__)


DEFAULT_SIGNALS: Tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


class SignalCancellation:
    """
    Installs cancellation handlers for a single playback session.

    Example:
        handlers = SignalCancellation(engine.cancel)
        handlers.install(asyncio.get_running_loop())
        try:
            await engine.play()
        finally:
            handlers.restore()
    """

    def __init__(
        self,
        callback: Callable[[], None],
        signals: Tuple[signal.Signals, ...] = DEFAULT_SIGNALS,
    ) -> None:
        self.callback = callback
        self.signals = signals

        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._loop_handlers: List[signal.Signals] = []
        self._previous: Dict[signal.Signals, Any] = {}

    def install(self, loop: asyncio.AbstractEventLoop) -> None:
        """Register handlers for every configured signal."""
        self._loop = loop

        for sig in self.signals:
            try:
                loop.add_signal_handler(sig, self._on_signal, sig)
                self._loop_handlers.append(sig)
                continue
            except (NotImplementedError, RuntimeError):
                # Loop-level handlers are unavailable (e.g. Windows)
                pass

            try:
                self._previous[sig] = signal.signal(sig, self._on_raw_signal)
            except ValueError as e:
                # signal.signal only works from the main thread
                logger.warning(f"Cannot install handler for {sig.name}: {e}")

    def restore(self) -> None:
        """Remove installed handlers and put back the previous ones."""
        for sig in self._loop_handlers:
            self._loop.remove_signal_handler(sig)
        self._loop_handlers.clear()

        for sig, previous in self._previous.items():
            signal.signal(sig, previous)
        self._previous.clear()

    def _on_signal(self, sig: signal.Signals) -> None:
        logger.info(f"Received {sig.name}, cancelling playback")
        self.callback()

    def _on_raw_signal(self, signum, frame) -> None:
        self._loop.call_soon_threadsafe(self._on_signal, signal.Signals(signum))
