"""Command line entry point for spinning correlation vectors."""

import argparse
import sys
from typing import List, Optional

from cvspin import __version__
from cvspin.exceptions import CorrelationVectorError
from cvspin.models.config import AppConfig
from cvspin.models.parameters import (
    SpinCounterInterval,
    SpinCounterPeriodicity,
    SpinParameters,
)
from cvspin.services.spin import SpinGenerator
from cvspin.utils.correlation import (
    get_or_generate_correlation_vector,
    set_correlation_vector,
)
from cvspin.utils.logging import LoggerMixin, setup_logging
from cvspin.utils.sources import EntropySource, TickClock


def positive_int(value: str) -> int:
    """Parse a count of at least one."""
    count = int(value)
    if count < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {count}")
    return count


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Apply the Spin operator to a correlation vector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Spin a freshly generated vector with the configured defaults
  python main.py

  # Spin an existing vector with a fine interval and a long counter
  python main.py tul4NUsfs9Cl7mOf.1 --interval fine --periodicity long

  # Validate the base vector first and print three spun vectors
  python main.py tul4NUsfs9Cl7mOf.1 --validate --count 3
        """,
    )

    parser.add_argument(
        "base",
        nargs="?",
        help="Correlation vector to spin (default: a newly generated V1 vector)",
    )

    # Spin parameters, defaulting to the SPIN_* settings
    parser.add_argument(
        "--interval",
        choices=[member.name.lower() for member in SpinCounterInterval],
        help="Counter increment interval",
    )
    parser.add_argument(
        "--periodicity",
        choices=[member.name.lower() for member in SpinCounterPeriodicity],
        help="Counter bit width",
    )
    parser.add_argument(
        "--entropy", type=int, choices=range(0, 5), help="Random bytes to append"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the base vector before spinning",
    )
    parser.add_argument(
        "--count",
        type=positive_int,
        default=1,
        help="Number of vectors to spin (default: 1)",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


class Application(LoggerMixin):
    """Main application class."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        clock: Optional[TickClock] = None,
        entropy_source: Optional[EntropySource] = None,
    ):
        self.config = config or AppConfig()
        self.clock = clock
        self.entropy_source = entropy_source

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the application and return the process exit code."""
        args = build_parser().parse_args(argv)

        setup_logging(
            level="DEBUG" if self.config.debug else self.config.logging.level,
            format_type=self.config.logging.format,
        )
        self.log_info(
            f"Starting correlation vector spin v{__version__} "
            f"(env: {self.config.environment})",
            environment=self.config.environment,
        )

        defaults = self.config.spin.parameters
        parameters = SpinParameters(
            interval=args.interval or defaults.interval,
            periodicity=args.periodicity or defaults.periodicity,
            entropy=defaults.entropy if args.entropy is None else args.entropy,
        )
        generator = SpinGenerator.from_config(
            self.config.spin, clock=self.clock, entropy_source=self.entropy_source
        )
        if args.validate:
            generator.validate_during_creation = True

        base = args.base or get_or_generate_correlation_vector()
        set_correlation_vector(base)

        try:
            for _ in range(args.count):
                print(generator.spin_with_parameters(base, parameters).value)
        except CorrelationVectorError as e:
            self.log_error(
                f"Failed to spin correlation vector: {e}", base_vector=base
            )
            print(f"✗ {e}", file=sys.stderr)
            return 1

        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    app = Application()
    return app.run(argv)


if __name__ == "__main__":
    sys.exit(main())
