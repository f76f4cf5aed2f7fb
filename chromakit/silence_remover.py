"""Audio consumer that drops leading silence from a mono signal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Protocol

# 5 ms at 11025 Hz
SILENCE_WINDOW = 55


class _AudioConsumer(Protocol):
    def consume(self, samples: list[int]) -> None: ...


class SilenceRemover:
    """Pass samples on to ``consumer`` once the signal leaves silence.

    Silence ends at the first sample where the average magnitude of the
    last ``SILENCE_WINDOW`` samples exceeds ``threshold``; that sample and
    everything after it is passed on.
    """

    def __init__(self, consumer: _AudioConsumer, threshold: int = 0) -> None:
        self.consumer = consumer
        self.threshold = threshold
        self._start = True
        self._window: deque[int] = deque(maxlen=SILENCE_WINDOW)
        self._sum = 0

    def reset(self, sample_rate: int, num_channels: int) -> None:
        """Start looking for the end of silence again; only mono is accepted."""
        if num_channels != 1:
            raise ValueError(f"expecting a mono audio signal, got {num_channels} channels")
        self._start = True

    def _add(self, value: int) -> None:
        if len(self._window) == self._window.maxlen:
            self._sum -= self._window[0]
        self._window.append(value)
        self._sum += value

    def _average(self) -> int:
        return self._sum // len(self._window) if self._window else 0

    def consume(self, samples: Iterable[int]) -> None:
        """Feed samples, passing on everything from the end of silence."""
        pending = list(samples)
        offset = 0
        if self._start:
            offset = len(pending)
            for index, sample in enumerate(pending):
                self._add(abs(sample))
                if self._average() > self.threshold:
                    self._start = False
                    offset = index
                    break
        remaining = pending[offset:]
        if remaining:
            self.consumer.consume(remaining)

    def flush(self) -> None:
        """Nothing is held back here; flush the downstream consumer if it can."""
        downstream_flush = getattr(self.consumer, "flush", None)
        if callable(downstream_flush):
            downstream_flush()