"""
run_challenge.py - Main Application Entry Point
================================================
Loads the configuration, runs the challenge once and exits.

Usage:
------
    python -m challenge.run_challenge
    python -m challenge.run_challenge --env-file prod.env
    python -m challenge.run_challenge --dry-run

Command Line Options:
---------------------
    --env-file  : Path to a .env file (default: .env in the project root)
    --dry-run   : Load settings and show the selected query without any API calls
    --debug     : Enable debug logging for troubleshooting

Exit Codes:
-----------
    0   : Solution submitted
    1   : Configuration error or failed run
    130 : Interrupted by user
"""

import sys
import logging
import argparse

from .config import load_settings
from .http_client import HttpClient
from .runner import ChallengeRunner
from .selector import select_query


LOG_LEVEL = logging.INFO

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%H:%M:%S'
)

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description='Register for a webhook and submit the SQL challenge answer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m challenge.run_challenge
  python -m challenge.run_challenge --env-file prod.env
  python -m challenge.run_challenge --dry-run
        """
    )
    parser.add_argument(
        '--env-file',
        default=None,
        help='Path to a .env file (default: .env in the project root)'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Show the selected query without making API calls'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    return parser.parse_args(argv)


def run_challenge(argv=None) -> int:
    """
    Main execution logic. Returns the process exit code.

    The HTTP client is always closed, even when the run is interrupted.
    """
    args = parse_arguments(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    client = None
    try:
        settings = load_settings(args.env_file)
        logger.info(f"Base URL: {settings.base_url}")
        logger.debug(f"Request timeout: {settings.timeout_sec}s")

        if args.dry_run:
            logger.info("DRY RUN MODE - No API calls will be made")
            query = select_query(settings.identity.reg_no)
            logger.info(f"Query that would be submitted: {query}")
            return 0

        client = HttpClient(settings)
        outcome = ChallengeRunner(settings, client).run()
        return 0 if outcome.ok else 1

    except KeyboardInterrupt:
        logger.warning("Interrupted by user. In-flight request abandoned.")
        return 130

    except RuntimeError as e:
        logger.error(f"Fatal error: {e}")
        return 1

    finally:
        if client:
            client.close()


def main():
    sys.exit(run_challenge())


if __name__ == '__main__':
    main()
