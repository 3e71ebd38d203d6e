from reqfile._defaults import (INVALID_PORT_MSG,
                               MALFORMED_HEADER_LINE_MSG,
                               MALFORMED_REQUEST_LINE_MSG,
                               MISSING_HOST_MSG,
                               UNSUPPORTED_SCHEME_MSG)


class RequestParseError(Exception):
    """
    Base class for every failure raised while parsing a request.
    A parse that raises never returns a partial request.
    """


class RequestReadError(RequestParseError, OSError):
    """
    Underlying stream could not be read or decoded.
    """


class MalformedRequestLineError(RequestParseError):

    def __init__(self, line: str):
        super().__init__(MALFORMED_REQUEST_LINE_MSG.format(line=line))
        self.line = line


class MalformedHeaderLineError(RequestParseError):

    def __init__(self, line: str):
        super().__init__(MALFORMED_HEADER_LINE_MSG.format(line=line))
        self.line = line


class UnsupportedSchemeError(RequestParseError):

    def __init__(self, scheme: str):
        super().__init__(UNSUPPORTED_SCHEME_MSG.format(scheme=scheme))
        self.scheme = scheme


class MissingHostInformationError(RequestParseError):

    def __init__(self):
        super().__init__(MISSING_HOST_MSG)


class InvalidPortError(RequestParseError):

    def __init__(self, value: str):
        super().__init__(INVALID_PORT_MSG.format(value=value))
        self.value = value
