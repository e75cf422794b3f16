"""
Command-line interface for converting a cache server profile to a newer version.

The converted profile is written to ``-out`` or to stdout; every diagnostic
goes to stderr so the output stream stays valid JSON.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Sequence

from profile_convert.conversion_pipeline import ConversionPipeline
from profile_convert.exceptions import (
    ConfigurationError,
    DocumentLoadError,
    DocumentParseError,
    OutputWriteError,
    ProfileValidationError,
)
from profile_convert.io import ProfileWriter

EXIT_OK = 0
EXIT_CONFIGURATION = 1
EXIT_LOAD = 2
EXIT_PARSE = 3
EXIT_VALIDATION = 4
EXIT_WRITE = 5
EXIT_UNEXPECTED = 9


@dataclass
class ConversionOptions:
    """Settings for one conversion run, built from the command line."""

    input_profile: Path
    rules: Path
    out: Path | None = None
    force: bool = False
    debug: bool = False
    verbose: bool = False


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Prefix messages with timestamp and logger name if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.INFO
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,  # stdout carries the converted profile
        force=True,  # Override existing configuration
    )


class ConversionArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with `EXIT_CONFIGURATION`."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_CONFIGURATION, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = ConversionArgumentParser(
        description="Convert a Traffic Control cache server profile to a newer version",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert and print the result
  profile-convert -input_profile edge_ats_7.json -rules ats7_to_ats8.json

  # Convert into a file, applying every rule regardless of current values
  profile-convert -input_profile edge.json -rules rules.json -out edge_new.json -force
        """,
    )

    parser.add_argument(
        "-input_profile",
        "--input-profile",
        dest="input_profile",
        help="Path of input profile (required)",
    )
    parser.add_argument(
        "-rules",
        "--rules",
        dest="rules",
        help="Path to conversion rules (required)",
    )
    parser.add_argument(
        "-out",
        "--out",
        dest="out",
        help="Path to write output file to. If not given, uses stdout",
    )
    parser.add_argument(
        "-force",
        "--force",
        dest="force",
        action="store_true",
        help="Ignore parameter value, making all recommended changes",
    )

    # Options
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Prefix log lines with timestamp and logger name",
    )
    return parser


def build_options(args: argparse.Namespace) -> ConversionOptions:
    """Turn parsed arguments into `ConversionOptions`.

    Raises:
        ConfigurationError: If a required option is missing.
    """
    if not args.input_profile:
        raise ConfigurationError(
            "Missing required -input_profile parameter", option="-input_profile"
        )
    if not args.rules:
        raise ConfigurationError("Missing required -rules parameter", option="-rules")

    return ConversionOptions(
        input_profile=Path(args.input_profile),
        rules=Path(args.rules),
        out=Path(args.out) if args.out else None,
        force=args.force,
        debug=args.debug,
        verbose=args.verbose,
    )


def run_conversion(options: ConversionOptions) -> NoReturn:
    """Execute the conversion and exit with the matching status code.

    Raises:
        SystemExit: Always (0 for success, >0 for errors).
    """
    logger = logging.getLogger(__name__)

    logger.info("Traffic Control Profile Conversion Utility")
    logger.info("Input Profile: %s", options.input_profile)
    logger.info("Conversion Rules: %s", options.rules)
    if options.force:
        logger.warning(
            "Ignoring existing parameter values in comparisons, "
            "making all suggested changes"
        )

    try:
        pipeline = ConversionPipeline(
            options.input_profile, options.rules, force=options.force
        )
        profile = pipeline.run()
        ProfileWriter().write(profile, out=options.out)

        if options.out is not None:
            logger.info("Converted profile saved to: %s", options.out)
        sys.exit(EXIT_OK)

    except DocumentLoadError as e:
        logger.error("Cannot load input: %s", e)
        logger.info("Suggestion: %s", e.get_recovery_hint())
        sys.exit(EXIT_LOAD)
    except DocumentParseError as e:
        logger.error("Cannot parse input: %s", e)
        logger.info("Suggestion: %s", e.get_recovery_hint())
        sys.exit(EXIT_PARSE)
    except ProfileValidationError as e:
        logger.error("%s", e)
        logger.info("Suggestion: %s", e.get_recovery_hint())
        sys.exit(EXIT_VALIDATION)
    except OutputWriteError as e:
        logger.error("Output error: %s", e)
        sys.exit(EXIT_WRITE)
    except Exception as e:
        logger.error("Unexpected error: %s", e)
        if options.debug:
            logger.exception("Full traceback:")
        sys.exit(EXIT_UNEXPECTED)


def main(argv: Sequence[str] | None = None) -> NoReturn:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug, args.verbose)

    try:
        options = build_options(args)
    except ConfigurationError as e:
        logging.getLogger(__name__).error("%s", e)
        sys.exit(EXIT_CONFIGURATION)

    run_conversion(options)


if __name__ == "__main__":
    main()
