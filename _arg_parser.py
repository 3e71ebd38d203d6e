import argparse
from reqfile._defaults import __email__, __author__

FORMATS = ("summary", "raw")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="""Parse raw HTTP request file and show where
         it should be sent.""",
        epilog=f"""Author:{__author__} <{__email__}>"""
    )

    parser.add_argument(
        "request_file",
        help="Path to the file with raw HTTP request."
    )

    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        default="summary",
        help="How to print parsed request: short summary"
             " or normalized raw request.\nDefault is summary."
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every parsing step to stderr."
    )

    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log messages to specified file."
    )

    return parser.parse_args(argv)
