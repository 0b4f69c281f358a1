from .cli import parse_args, parse_weights, setup_logging
