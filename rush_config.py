import argparse

# Configuration
DEFAULT_COUNT = 2_000_000
DEFAULT_SEED  = 7
OUTPUT_DIR    = "output"
OUTPUT_FILE   = "rush_hour.png"
TOP_K         = 8


def positive_int(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return n


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate synthetic bike-share trips and plot rush-hour patterns"
    )

    parser.add_argument('--count', type=int, default=DEFAULT_COUNT,
                        help='Number of synthetic trips to generate')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED,
                        help='Random seed for the trip generator')
    parser.add_argument('--output', default=f"{OUTPUT_DIR}/{OUTPUT_FILE}",
                        help='Path of the PNG to write')
    parser.add_argument('--top', type=positive_int, default=TOP_K,
                        help='Rows to show in each station table')

    return parser.parse_args(argv)
