"""CLI options for selecting the input mode, tick cadence, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Arrow Chain puzzle (5x5 chain-reaction grid)")
    parser.add_argument(
        "--mode",
        choices=["script", "text", "gui"],
        default="text",
        help="Input mode: batch command script, interactive text, or pygame window",
    )
    parser.add_argument("--script", help="Command file for --mode script ('-' reads stdin)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--render-ms", type=int, help="Render tick period in milliseconds")
    parser.add_argument("--chain-ms", type=int, help="Chain tick period in milliseconds")
    parser.add_argument("--window-size", type=int, help="Pygame window size in pixels")
    parser.add_argument("--keep-going", action="store_true", help="Report bad script lines and continue")
    parser.add_argument("--quiet", action="store_true", help="Do not log accepted/rejected moves")
    return parser.parse_args(argv)
