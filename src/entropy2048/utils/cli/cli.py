import argparse
import logging
import sys

from ...config import LOG_FORMAT


def setup_logging(log_file=None, level=logging.INFO):
    """
    Set up logging configuration.

    Args:
        log_file: Optional path to a log file
        level: Logging level of the root logger
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers
    )


def parse_weights(text):
    """Parse six comma separated floats, as given to --weights."""
    try:
        weights = [float(value) for value in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid weights: {text!r}")
    if len(weights) != 6:
        raise argparse.ArgumentTypeError(f"Expected 6 weights, got {len(weights)}")
    return weights


def parse_args(args=None):
    """
    Parse command-line arguments.

    Args:
        args: Command-line arguments (defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Play 2048 games with an artificial player"
    )

    # General options
    parser.add_argument("--player", choices=["features", "random"], default="features",
                        help="Player to run (default: features)")
    parser.add_argument("--games", type=int, default=1,
                        help="Number of games to play (default: 1)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (default: current time)")

    # Player options
    parser.add_argument("--weights", type=parse_weights, default=None,
                        help="Six comma separated feature weights")
    parser.add_argument("--leaf", choices=["plain", "spawns"], default="plain",
                        help="Leaf evaluation of the search (default: plain)")

    # Output options
    parser.add_argument("--plot", type=str, default=None,
                        help="Save a plot of the scores to this path")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Also write the log to this file")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every chosen move and the features of every evaluated board (slow)")
    parser.add_argument("--trace", action="store_true",
                        help="Also log every node of the search tree (very slow)")

    return parser.parse_args(args)
