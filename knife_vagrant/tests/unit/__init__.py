import os
import tempfile
import unittest
from contextlib import contextmanager


class KnifeVagrantTest(unittest.TestCase):
    pass


@contextmanager
def into_tmp_dir():
    old_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmp_dir:
        try:
            os.chdir(tmp_dir)
            # resolve symlinks (e.g /tmp on macOS) to compare with os.getcwd()
            yield os.getcwd()
        finally:
            os.chdir(old_cwd)
