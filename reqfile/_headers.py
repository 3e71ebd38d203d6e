import logging
from typing import Dict, Tuple

from reqfile._defaults import HEADER_MSG, DUPLICATE_HEADER_MSG
from reqfile._errors import MalformedHeaderLineError
from reqfile._line_reader import LineReader

LOGGER = logging.getLogger(__name__)

HEADER_SEPARATOR = ":"


def parse_header_line(line: str) -> Tuple[str, str]:
    """
    Split header line on the first colon.
    Name is kept as written, value is stripped.
    """
    name, sep, value = line.partition(HEADER_SEPARATOR)
    if not sep:
        raise MalformedHeaderLineError(line)
    return name, value.strip()


def parse_headers(reader: LineReader) -> Dict[str, str]:
    """
    Read header block up to the first empty line or end of stream.

    Returns:
        dict-mapping from HTTP request headers fields to theirs value.
        Later field with the same name replaces the earlier one.
    """
    headers = {}
    while True:
        line = reader.read_line()
        if not line:
            return headers
        name, value = parse_header_line(line)
        if name in headers:
            LOGGER.debug(DUPLICATE_HEADER_MSG.format(name=name))
        headers[name] = value
        LOGGER.debug(HEADER_MSG.format(name=name, value=value))
