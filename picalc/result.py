import operator
import threading
from contextlib import contextmanager
from typing import Iterable, List, Optional

from .errors import AllocationError, InvalidPrecisionError


DIGITS_PER_UNIT = 14.0
MAX_PROGRESS = 99.0


class ReadWriteLock:
    """Many readers or one writer. Writers waiting block new readers."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


def validate_precision(precision) -> int:
    if isinstance(precision, bool):
        raise InvalidPrecisionError("precision must be an integer")
    try:
        precision = operator.index(precision)
    except TypeError as exc:
        raise InvalidPrecisionError("precision must be an integer") from exc
    if precision < 0:
        raise InvalidPrecisionError("precision must be >= 0")
    return precision


class PiResult:
    """Digits of pi being computed, shared with concurrent readers.

    The digit buffer sits behind a read-write lock and is written once.
    The progress counter has its own lock so polling it never waits on
    digit readers or the writer.
    """

    def __init__(self, precision: int):
        self._precision = validate_precision(precision)
        try:
            self._digits = bytearray(self._precision + 1)
        except (MemoryError, OverflowError) as exc:
            raise AllocationError(f"cannot allocate {self._precision + 1} digits") from exc
        self._lock = ReadWriteLock()
        self._computed = 0
        self._computed_lock = threading.Lock()
        self._done = threading.Event()

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def done(self) -> bool:
        return self._done.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._done.wait(timeout)

    def __len__(self) -> int:
        return len(self._digits)

    def write_digits(self, digits: Iterable[int]):
        if self._done.is_set():
            raise RuntimeError("result is already complete")
        buf = bytearray(digits)
        if len(buf) != len(self._digits):
            raise ValueError("digit count does not match precision")
        with self._lock.write():
            self._digits = buf

    def get_digits(self, n: int) -> List[int]:
        n = max(0, int(n))
        with self._lock.read():
            return list(self._digits[:n])

    def increment_progress(self, amount: int):
        amount = int(amount)
        if amount < 0:
            raise ValueError("progress only moves forward")
        with self._computed_lock:
            self._computed += amount

    def mark_complete(self):
        with self._computed_lock:
            self._computed = max(self._computed, self._precision)
        self._done.set()

    @property
    def computed(self) -> int:
        return self._computed

    def get_progress(self) -> float:
        divisor = self._precision / DIGITS_PER_UNIT
        if divisor <= 0:
            divisor = 1.0
        progress = self._computed / divisor * 100.0
        return min(MAX_PROGRESS, max(0.0, progress))
