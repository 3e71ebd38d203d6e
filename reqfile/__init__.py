from reqfile._errors import (RequestParseError,
                             RequestReadError,
                             MalformedRequestLineError,
                             MalformedHeaderLineError,
                             UnsupportedSchemeError,
                             MissingHostInformationError,
                             InvalidPortError)
from reqfile._parser import parse_request, parse_bytes, parse_file
from reqfile._request import ParsedRequest
from reqfile._request_line import RequestLine
from reqfile._target import ConnectionTarget

__all__ = [
    "RequestParseError",
    "RequestReadError",
    "MalformedRequestLineError",
    "MalformedHeaderLineError",
    "UnsupportedSchemeError",
    "MissingHostInformationError",
    "InvalidPortError",
    "parse_request",
    "parse_bytes",
    "parse_file",
    "ParsedRequest",
    "RequestLine",
    "ConnectionTarget",
]
