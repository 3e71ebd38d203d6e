from typing import BinaryIO

from reqfile._errors import RequestReadError

ENCODING = "utf-8"
LINE_TERMINATORS = ("\r\n", "\n")


class LineReader:
    """
    Reads a request stream line by line, then drains the rest as bytes.
    Every line read must happen before |read_to_end|.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    def read_line(self) -> str:
        """
        Returns next line without its terminator.
        Empty string is returned both for a blank line and
        for the end of stream.
        """
        try:
            raw_line = self._stream.readline()
        except OSError as e:
            raise RequestReadError(f"Unable to read line: {e}") from e
        try:
            line = raw_line.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise RequestReadError(
                f"Line is not valid {ENCODING}: {raw_line!r}"
            ) from e
        return strip_terminator(line)

    def read_to_end(self) -> bytes:
        try:
            return self._stream.read()
        except OSError as e:
            raise RequestReadError(f"Unable to read body: {e}") from e


def strip_terminator(line: str) -> str:
    """
    Removes trailing line terminator only if the line actually has one.
    """
    for terminator in LINE_TERMINATORS:
        if line.endswith(terminator):
            return line[:-len(terminator)]
    return line
