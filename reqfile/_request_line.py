import logging
from typing import NamedTuple

from reqfile._defaults import DEFAULT_HTTP_VERSION, REQUEST_LINE_MSG
from reqfile._errors import MalformedRequestLineError

LOGGER = logging.getLogger(__name__)

TOKEN_SEPARATOR = " "


class RequestLine(NamedTuple):
    """
     "method": HTTP request method, any token is accepted.
     "target": request target as written, absolute url or path.
     "version": protocol version, "HTTP/1.1" if omitted.
    """
    method: str
    target: str
    version: str = DEFAULT_HTTP_VERSION

    def __str__(self):
        return TOKEN_SEPARATOR.join(self)


def parse_request_line(line: str) -> RequestLine:
    """
    Parse first line of HTTP request.

    Params:
        line: request line without its terminator

    Returns:
        |RequestLine| object
    """
    parts = line.split(TOKEN_SEPARATOR)
    if len(parts) not in (2, 3) or not all(parts[:2]):
        raise MalformedRequestLineError(line)
    request_line = RequestLine(*parts)
    LOGGER.debug(REQUEST_LINE_MSG.format(**request_line._asdict()))
    return request_line
