class PicalcError(Exception):
    pass


class InvalidPrecisionError(PicalcError, ValueError):
    pass


class AllocationError(PicalcError, MemoryError):
    pass


class FileWriteError(PicalcError, OSError):
    pass


class ComputationCancelled(PicalcError):
    pass
