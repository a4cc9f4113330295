from typing import Sequence

from .errors import FileWriteError


BATCH_SIZE = 1000


def format_digits(digits: Sequence[int]) -> str:
    return "3." + "".join(str(d) for d in digits[1:])


def write_digits_to_file(digits: Sequence[int], path: str, batch_size: int = BATCH_SIZE):
    batch_size = int(batch_size)
    if batch_size < 1:
        raise ValueError("batch_size must be >= 1")
    try:
        with open(path, "wb") as f:
            f.write(b"3.")
            for i in range(1, len(digits), batch_size):
                chunk = "".join(str(d) for d in digits[i : i + batch_size])
                f.write(chunk.encode("ascii"))
    except OSError as exc:
        raise FileWriteError(f"cannot write digits to {path}: {exc}") from exc
