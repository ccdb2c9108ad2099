"""Command-line front end: ``randbytes [options] [bytes]``.

Parses options into a :class:`~randbytes.config.RandBytesConfig`, runs a
single :class:`~randbytes.generator.Generator` against standard output and
maps failures to exit codes:

    0  success
    1  entropy or I/O failure
    2  usage or configuration error (nothing written to stdout)
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import BinaryIO

from randbytes import __version__
from randbytes.config import DEFAULT_BYTE_COUNT, OutputFormat, SourceKind, load_config
from randbytes.exceptions import ConfigValidationError, EntropyUnavailableError
from randbytes.generator import Generator

logger = logging.getLogger("randbytes")

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2

_POSITIVE_INT = re.compile(r"^0*[1-9]\d*$")
_U64_LIMIT = 1 << 64


def _byte_count(text: str) -> int:
    if not _POSITIVE_INT.match(text):
        raise argparse.ArgumentTypeError(f"{text!r} is not a positive integer")
    return int(text)


def _u64(text: str) -> int:
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not an unsigned 64-bit integer") from None
    if not 0 <= value < _U64_LIMIT:
        raise argparse.ArgumentTypeError(f"{text!r} is not an unsigned 64-bit integer")
    return value


def _width(text: str) -> int:
    if not _POSITIVE_INT.match(text):
        raise argparse.ArgumentTypeError(f"{text!r} is not a positive line width")
    return int(text)


def build_parser(prog: str = "randbytes", default_bytes: int = DEFAULT_BYTE_COUNT) -> argparse.ArgumentParser:
    """Build the argument parser.

    Args:
        prog: Program name shown in help and error messages.
        default_bytes: Byte count advertised in the help text.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog=prog,
        description=f"{prog} - create random data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  %(prog)s                          # 16 secure bytes as lowercase hex
  %(prog)s 32 --base64              # 32 bytes, base64
  %(prog)s --pcg32 --seed 42 8      # reproducible output
  %(prog)s 1024 --raw > key.bin     # raw bytes, redirected output only
  %(prog)s 96 --hex --line-feed 63  # wrap after every 64 characters
""",
    )
    parser.add_argument(
        "byte_count",
        metavar="bytes",
        nargs="?",
        type=_byte_count,
        default=None,
        help=f"Integer number of bytes to output (default: {default_bytes})",
    )

    sources = parser.add_argument_group("source").add_mutually_exclusive_group()
    sources.add_argument(
        "--secure", dest="source", action="store_const", const=SourceKind.SECURE,
        help="OS cryptographically secure random (default)",
    )
    sources.add_argument(
        "--isaac", dest="source", action="store_const", const=SourceKind.ISAAC,
        help="ISAAC PRNG, seedable",
    )
    sources.add_argument(
        "--pcg32", "--no-secure", dest="source", action="store_const", const=SourceKind.PCG32,
        help="PCG32 PRNG, seedable, with stream selection",
    )
    sources.add_argument(
        "--dev-random", "--dev", dest="source", action="store_const", const=SourceKind.DEV_RANDOM,
        help="Read /dev/random",
    )
    sources.add_argument(
        "--dev-urandom", dest="source", action="store_const", const=SourceKind.DEV_URANDOM,
        help="Read /dev/urandom",
    )
    parser.add_argument(
        "--seed", type=_u64, default=None,
        help="Unsigned 64-bit seed (only with --isaac or --pcg32)",
    )
    parser.add_argument(
        "--sequence", type=_u64, default=None,
        help="Unsigned 64-bit stream selector (only with --pcg32)",
    )

    formats = parser.add_argument_group("format").add_mutually_exclusive_group()
    formats.add_argument(
        "--base64", dest="format", action="store_const", const=OutputFormat.BASE64,
        help="Standard base64",
    )
    formats.add_argument(
        "--url-base64", "--url64", dest="format", action="store_const",
        const=OutputFormat.URL_BASE64,
        help="URL-safe base64",
    )
    formats.add_argument(
        "--raw", dest="format", action="store_const", const=OutputFormat.RAW,
        help="Output the raw bytes with no newline or other terminator",
    )
    formats.add_argument(
        "--hex", "--hex-lower", dest="format", action="store_const", const=OutputFormat.HEX_LOWER,
        help="Lowercase hex (default)",
    )
    formats.add_argument(
        "--hex-upper", dest="format", action="store_const", const=OutputFormat.HEX_UPPER,
        help="Uppercase hex",
    )
    formats.add_argument(
        "--url-encoded", dest="format", action="store_const", const=OutputFormat.URL_ENCODED,
        help="Percent-encoded, keeping [A-Za-z0-9_.~/-] as-is",
    )

    parser.add_argument(
        "--line-feed", dest="line_wrap_width", metavar="WIDTH", type=_width, default=None,
        help="Insert a newline after every WIDTH+1 output bytes",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log debug information and a run summary to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: list[str] | None = None,
    stdout: BinaryIO | None = None,
    interactive: bool | None = None,
) -> int:
    """Parse arguments and run the generator.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.
        stdout: Binary output stream. Defaults to ``sys.stdout.buffer``.
        interactive: Override terminal detection of *stdout*.

    Returns:
        Process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(
            source=args.source,
            seed=args.seed,
            sequence=args.sequence,
            format=args.format,
            byte_count=args.byte_count,
            line_wrap_width=args.line_wrap_width,
            log_level="summary" if args.verbose else None,
        )
        if config.log_level != "none" and not args.verbose:
            logger.setLevel(logging.INFO)
        Generator(config, sink=stdout, interactive=interactive).run()
    except ConfigValidationError as exc:
        parser.print_usage(sys.stderr)
        sys.stderr.write(f"{parser.prog}: error: {exc}\n")
        return EXIT_USAGE
    except EntropyUnavailableError as exc:
        logger.debug("Entropy failure", exc_info=True)
        sys.stderr.write(f"{parser.prog}: error: {exc}\n")
        return EXIT_IO_ERROR
    except OSError as exc:
        sys.stderr.write(f"{parser.prog}: error: {exc}\n")
        return EXIT_IO_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
