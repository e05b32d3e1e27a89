import argparse
import logging
import sys

from cliptray import __version__
from cliptray.config import HISTORY_SIZE, LOG_PATH, POLL_INTERVAL
from cliptray.utils import ensure_dirs


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def positive_float(value: str) -> float:
    number = float(value)
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cliptray",
        description="Cliptray - Clipboard history in the macOS menu bar",
    )
    parser.add_argument(
        "--history-size",
        type=positive_int,
        default=HISTORY_SIZE,
        help=f"Number of entries to keep (default: {HISTORY_SIZE})",
    )
    parser.add_argument(
        "--interval",
        type=positive_float,
        default=POLL_INTERVAL,
        help=f"Seconds between clipboard checks (default: {POLL_INTERVAL})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose: bool = False) -> None:
    ensure_dirs()

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(LOG_PATH),
            logging.StreamHandler(sys.stderr),
        ],
    )


def run_app(history_size: int = HISTORY_SIZE, interval: float = POLL_INTERVAL) -> None:
    """Run the Cliptray application."""
    from cliptray.app import ClipTrayApp

    app = ClipTrayApp(capacity=history_size, interval=interval)
    app.run()


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    run_app(args.history_size, args.interval)


if __name__ == "__main__":
    main()
