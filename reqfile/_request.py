from types import MappingProxyType
from typing import Mapping, NamedTuple

from reqfile._defaults import CRLF
from reqfile._line_reader import ENCODING
from reqfile._request_line import RequestLine
from reqfile._target import ConnectionTarget


class ParsedRequest(NamedTuple):
    """
     "request_line": method, origin-form target and version.
     "headers": read-only mapping from header fields to theirs value.
      "Host" always holds resolved host without port.
     "body": raw binary request body.
     "connection": host and port the request should be sent to.
    """
    request_line: RequestLine
    headers: Mapping[str, str]
    body: bytes
    connection: ConnectionTarget

    @classmethod
    def build(cls, request_line, headers, body, connection):
        return cls(
            request_line,
            MappingProxyType(dict(headers)),
            body,
            connection
        )

    @property
    def method(self) -> str:
        return self.request_line.method

    @property
    def target(self) -> str:
        return self.request_line.target

    @property
    def version(self) -> str:
        return self.request_line.version

    @property
    def host(self) -> str:
        return self.connection.host

    @property
    def port(self) -> int:
        return self.connection.port

    def to_bytes(self) -> bytes:
        """
        Render request in the form it should be sent to the server.
        """
        head = [str(self.request_line)]
        head.extend(f"{name}: {value}" for name, value in self.headers.items())
        return (CRLF.join(head) + CRLF * 2).encode(ENCODING) + self.body

    def __str__(self):
        return f"Request {self.method} {self.target}"
