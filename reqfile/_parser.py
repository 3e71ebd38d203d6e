import io
import logging
import os
from typing import BinaryIO, Union

from reqfile._defaults import (BODY_CAPTURED_MSG,
                               PARSE_FAILED_MSG,
                               PARSING_STARTED_MSG,
                               RESOLVED_MSG)
from reqfile._errors import RequestParseError, RequestReadError
from reqfile._headers import parse_headers
from reqfile._line_reader import LineReader
from reqfile._request import ParsedRequest
from reqfile._request_line import parse_request_line
from reqfile._target import normalize_host_header, resolve_target

LOGGER = logging.getLogger(__name__)


def parse_request(stream: BinaryIO) -> ParsedRequest:
    """
    Parse HTTP request read from binary stream.

    Params:
        stream: binary stream positioned at the request line.
         It is not closed here.

    Returns:
        |ParsedRequest| object with resolved host and port.
    """
    reader = LineReader(stream)
    request_line = parse_request_line(reader.read_line())
    headers = parse_headers(reader)
    body = reader.read_to_end()
    LOGGER.debug(BODY_CAPTURED_MSG.format(size=len(body)))
    request_line, connection = resolve_target(request_line, headers)
    normalize_host_header(headers, connection)
    LOGGER.debug(RESOLVED_MSG.format(
        method=request_line.method,
        target=request_line.target,
        host=connection.host,
        port=connection.port
    ))
    return ParsedRequest.build(request_line, headers, body, connection)


def parse_bytes(data: bytes) -> ParsedRequest:
    """Parse HTTP request held in memory."""
    return parse_request(io.BytesIO(data))


def parse_file(path: Union[str, os.PathLike]) -> ParsedRequest:
    """
    Parse HTTP request stored in a file.
    File is closed whether parsing succeeds or not.
    """
    LOGGER.info(PARSING_STARTED_MSG.format(source=path))
    try:
        with open(path, "rb") as f:
            return parse_request(f)
    except RequestParseError as e:
        LOGGER.info(PARSE_FAILED_MSG.format(source=path, error=e))
        raise
    except OSError as e:
        LOGGER.info(PARSE_FAILED_MSG.format(source=path, error=e))
        raise RequestReadError(f"Cannot open {path}: {e}") from e
