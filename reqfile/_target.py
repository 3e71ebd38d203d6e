import logging
import re
from typing import Dict, NamedTuple, Optional, Tuple

from reqfile._defaults import (ABSOLUTE_TARGET_MSG,
                               DEFAULT_PATH,
                               DEFAULT_PORT,
                               HOST_HEADER,
                               MAX_PORT,
                               SCHEMES)
from reqfile._errors import (InvalidPortError,
                             MissingHostInformationError,
                             UnsupportedSchemeError)
from reqfile._request_line import RequestLine

LOGGER = logging.getLogger(__name__)

scheme_regex = re.compile(
    r"^({})://".format("|".join(re.escape(scheme) for scheme in SCHEMES))
)
port_regex = re.compile(r"\d+", re.ASCII)


class ConnectionTarget(NamedTuple):
    host: str
    port: int

    def __str__(self):
        return f"{self.host}:{self.port}"


class Resolution(NamedTuple):
    """
     "request_line": request line with origin-form target.
     "target": host and port the request should be sent to.
    """
    request_line: RequestLine
    target: ConnectionTarget


def split_absolute_target(target: str) -> Tuple[Optional[str], str, int]:
    """
    Split absolute-form target into host part and path.

    Returns:
        (raw host, path, default port of scheme).
        Raw host is None for origin-form targets.
    """
    mo = re.match(scheme_regex, target)
    if mo is None:
        return None, target, DEFAULT_PORT
    scheme = mo.group(1)
    default_port = SCHEMES[scheme]
    if default_port is None:
        raise UnsupportedSchemeError(scheme)
    remainder = target[mo.end():]
    slash_idx = remainder.find("/")
    if slash_idx == -1:
        return remainder, DEFAULT_PATH, default_port
    return remainder[:slash_idx], remainder[slash_idx:], default_port


def split_host(raw_host: str, default_port: int = DEFAULT_PORT) -> ConnectionTarget:
    """
    Split "host[:port]" on the first colon.
    """
    host, sep, raw_port = raw_host.partition(":")
    if not sep:
        return ConnectionTarget(host, default_port)
    if port_regex.fullmatch(raw_port) is None:
        raise InvalidPortError(raw_port)
    port = int(raw_port)
    if port > MAX_PORT:
        raise InvalidPortError(raw_port)
    return ConnectionTarget(host, port)


def resolve_target(
        request_line: RequestLine,
        headers: Dict[str, str]
) -> Resolution:
    """
    Find out where request should be sent.
    Absolute-form target wins over Host header.
    Doesn't modify its arguments.
    """
    raw_host, path, default_port = split_absolute_target(request_line.target)
    if raw_host is None:
        raw_host = headers.get(HOST_HEADER)
        if raw_host is None:
            raise MissingHostInformationError()
    else:
        LOGGER.debug(ABSOLUTE_TARGET_MSG.format(
            target=request_line.target, path=path))
    return Resolution(
        request_line._replace(target=path),
        split_host(raw_host, default_port)
    )


def normalize_host_header(
        headers: Dict[str, str],
        target: ConnectionTarget
) -> None:
    """
    Put resolved host, without port, into Host header.
    """
    headers[HOST_HEADER] = target.host
