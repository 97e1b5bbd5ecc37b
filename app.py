"""Upload emojis to Mattermost from a JSON file."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ddtrace import patch, tracer

from config import Config, ImportSettings
from importer import run_import
from mattermost_api import IdentityError
from utils import ManifestError, load_manifest

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),  # stderr, the report goes to stdout
        ]
    )

    # Set log levels for noisy libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("ddtrace").setLevel(logging.WARNING)


def configure_tracing():
    """Trace outgoing HTTP calls made through requests."""
    patch(requests=True)

    # Set Datadog tracer tags
    tracer.set_tags({
        "env": Config.DD_ENV,
        "version": Config.DD_VERSION,
        "service": Config.DD_SERVICE,
    })


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    prog = Path(sys.argv[0]).name or "mattermost-emoji-import"
    parser = argparse.ArgumentParser(
        prog=prog,
        description="A tool to upload emojis to Mattermost from a JSON file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {prog} --server https://mattermost.example.com --token TOKEN --file emoji.json\n"
            f"  {prog} -server https://mattermost.example.com -token TOKEN -file emoji.json\n"
            f"  {prog} -s https://mattermost.example.com -t TOKEN -f emoji.json\n"
            "\n"
            "The JSON file maps emoji names to image URLs; values of the form\n"
            "\"alias:<name>\" are skipped."
        ),
    )
    parser.add_argument(
        "-s", "-server", "--server",
        dest="server",
        default=Config.MATTERMOST_URL,
        help="Mattermost server URL without trailing slash (required, env: MATTERMOST_URL)",
    )
    parser.add_argument(
        "-t", "-token", "--token",
        dest="token",
        default=Config.MATTERMOST_TOKEN,
        help="Personal Access Token (required, env: MATTERMOST_TOKEN)",
    )
    parser.add_argument(
        "-f", "-file", "--file",
        dest="file",
        help="Path to your source JSON file (required)",
    )
    parser.add_argument(
        "--delay-ms",
        type=non_negative_int,
        default=Config.UPLOAD_DELAY_MS,
        help="Pause between two emojis in milliseconds (default: %(default)s)",
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        default=Config.REQUEST_TIMEOUT,
        help="Timeout of each HTTP request in seconds (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate required flags
    for value, flag in ((args.server, "server/-s"), (args.token, "token/-t"), (args.file, "file/-f")):
        if not value:
            print(f"❌ Error: -{flag} flag is required", file=sys.stderr)
            parser.print_help(sys.stderr)
            return 1

    configure_logging()

    settings = ImportSettings(
        server_url=args.server,
        token=args.token,
        manifest_path=Path(args.file),
        timeout=args.timeout,
        delay_seconds=args.delay_ms / 1000,
    )

    try:
        manifest = load_manifest(settings.manifest_path)
    except ManifestError as e:
        logger.debug(f"[MANIFEST] {e}")
        print(f"❌ {e}", file=sys.stderr)
        return 1

    configure_tracing()

    try:
        run_import(settings, manifest)
    except IdentityError as e:
        logger.debug(f"[IDENTITY] Could not resolve token owner: {e}")
        print(f"❌ Error getting user ID: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
