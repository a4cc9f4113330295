import os
import tempfile

import pytest

from picalc.errors import FileWriteError
from picalc.output import format_digits, write_digits_to_file


def test_write_digits_roundtrip():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "pi.txt")
        write_digits_to_file([3, 1, 4, 1, 5, 9], path)
        with open(path, "rb") as f:
            assert f.read() == b"3.14159"


def test_write_digits_batches_do_not_change_output():
    digits = [3] + [i % 10 for i in range(1, 2501)]
    with tempfile.TemporaryDirectory() as td:
        a = os.path.join(td, "a.txt")
        b = os.path.join(td, "b.txt")
        write_digits_to_file(digits, a)
        write_digits_to_file(digits, b, batch_size=7)
        with open(a, "rb") as fa, open(b, "rb") as fb:
            assert fa.read() == fb.read()


def test_write_digits_overwrites():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "pi.txt")
        with open(path, "w") as f:
            f.write("stale content that is longer")
        write_digits_to_file([3, 1, 4], path)
        with open(path, "rb") as f:
            assert f.read() == b"3.14"


def test_write_only_integer_digit():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "pi.txt")
        write_digits_to_file([3], path)
        with open(path, "rb") as f:
            assert f.read() == b"3."


def test_write_failure():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "missing", "pi.txt")
        with pytest.raises(FileWriteError) as info:
            write_digits_to_file([3, 1, 4], path)
        assert isinstance(info.value.__cause__, OSError)


def test_format_digits():
    assert format_digits([3, 1, 4, 1, 5]) == "3.1415"
