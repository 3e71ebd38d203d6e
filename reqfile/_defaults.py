__author__ = "Dmitry Podaruev"
__email__ = "ddqof.vvv@gmail.com"

DEFAULT_HTTP_VERSION = "HTTP/1.1"
DEFAULT_PATH = "/"
HOST_HEADER = "Host"
MAX_PORT = 2 ** 16 - 1
CRLF = "\r\n"

#  default port of every scheme that can be dispatched,
#  None marks a known but unsupported scheme
SCHEMES = {
    "http": 80,
    "https": None,
}
DEFAULT_PORT = SCHEMES["http"]

PARSING_STARTED_MSG = "Parsing request from {source}"
REQUEST_LINE_MSG = "Request line: {method} {target} {version}"
HEADER_MSG = "Header {name}: {value}"
DUPLICATE_HEADER_MSG = "Header {name} redefined, keeping last value"
BODY_CAPTURED_MSG = "Captured {size} body bytes"
ABSOLUTE_TARGET_MSG = "Absolute target {target} rewritten to {path}"
RESOLVED_MSG = "Resolved {method} {target} to {host}:{port}"
PARSE_FAILED_MSG = "Failed to parse {source}: {error}"

EXIT_PARSE_ERROR = 3

MALFORMED_REQUEST_LINE_MSG = "Invalid request line (wrong number of parts): {line!r}"
MALFORMED_HEADER_LINE_MSG = "Invalid header line (missing ':'): {line!r}"
UNSUPPORTED_SCHEME_MSG = "Unsupported scheme: {scheme}"
MISSING_HOST_MSG = "Request target has no host and no Host header was given"
INVALID_PORT_MSG = "Invalid port: {value!r}"
