__version__ = "0.1.0"

__all__ = [
    "PiResult",
    "SeriesTriple",
    "calculate_pi",
    "new_pi",
    "split_parallel",
    "split_serial",
    "reduce_triple",
    "write_digits_to_file",
    "verify_digits",
    "PicalcError",
    "InvalidPrecisionError",
    "AllocationError",
    "FileWriteError",
    "ComputationCancelled",
]

from .chudnovsky import SeriesTriple, split_serial
from .compute import calculate_pi, new_pi
from .errors import AllocationError, ComputationCancelled, FileWriteError, InvalidPrecisionError, PicalcError
from .output import write_digits_to_file
from .parallel import split_parallel
from .reducer import reduce_triple
from .result import PiResult
from .verify import verify_digits
