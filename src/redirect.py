import os
import sys


class RedirectFile:
    """
    Send everything written to a stream's file descriptor to the null device
    for the duration of a with block, then put the original descriptor back.

    Works at the descriptor level so that output from native code (the calibration
    library logs straight to stdout/stderr) is discarded too, not only Python writes.
    """

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout
        self._no = None
        self._old_no = None
        self._null = None

    def __enter__(self):
        self.stream.flush()
        self._no = self.stream.fileno()
        self._old_no = os.dup(self._no)
        try:
            self._null = open(os.devnull, "w")
            os.dup2(self._null.fileno(), self._no)
        except OSError:
            if self._null is not None:
                self._null.close()
                self._null = None
            os.close(self._old_no)
            self._old_no = None
            raise
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        try:
            self.stream.flush()
        finally:
            os.dup2(self._old_no, self._no)
            os.close(self._old_no)
            self._null.close()
        return False
