#!/usr/bin/env python3

import sys

from _arg_parser import parse_args
from reqfile import ParsedRequest, RequestParseError, parse_file
from reqfile._defaults import EXIT_PARSE_ERROR
from reqfile._log_config import configure_logging


def format_summary(request: ParsedRequest) -> str:
    lines = [
        f"Method:     {request.method}",
        f"Target:     {request.target}",
        f"Version:    {request.version}",
        f"Connection: {request.connection}",
        "Headers:",
    ]
    lines.extend(f"    {name}: {value}"
                 for name, value in request.headers.items())
    lines.append(f"Body:       {len(request.body)} bytes")
    return "\n".join(lines)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose, args.log_file)
    try:
        request = parse_file(args.request_file)
    except RequestParseError as e:
        print(e, file=sys.stderr)
        return EXIT_PARSE_ERROR
    if args.format == "raw":
        sys.stdout.buffer.write(request.to_bytes())
        sys.stdout.flush()
    else:
        print(format_summary(request))
    return 0


if __name__ == '__main__':
    sys.exit(main())
