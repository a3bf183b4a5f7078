#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

"""
Check the APIG service proxies declared in a serverless.yml before deploying.

Usage:
    validate-apig-proxies serverless.yml
    validate-apig-proxies serverless.yml --custom-key apiGatewayServiceProxies --json
"""

import argparse
import json
import logging
import os
import sys

from dotenv import load_dotenv

from common.errors import ConfigLoadError
from common.loader import DEFAULT_CUSTOM_KEY, load_service_proxies
from common.validate import validate_proxies

load_dotenv(dotenv_path=".env.local")

logger = logging.getLogger("proxy_cli")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Validate the API Gateway service proxies of a serverless.yml"
    )
    parser.add_argument(
        "config",
        nargs="?",
        default="serverless.yml",
        help="Path to the service configuration (default: serverless.yml)",
    )
    parser.add_argument(
        "--custom-key",
        default=os.getenv("PROXIES_CUSTOM_KEY", DEFAULT_CUSTOM_KEY),
        help="Key under 'custom' that holds the proxy list",
    )
    parser.add_argument("--json", action="store_true", help="Print errors as JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)
    # defaults taken from the environment skip the choices check
    if args.log_level not in LOG_LEVELS:
        parser.error(f"argument --log-level: invalid choice: '{args.log_level}'")
    return args


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    try:
        proxies = load_service_proxies(args.config, args.custom_key)
    except ConfigLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    errors = validate_proxies(proxies)

    if args.json:
        print(json.dumps(errors, indent=2))
    else:
        for error in errors:
            print(f"{error['path'] or '<root>'}: {error['message']}")

    if errors:
        logger.info("%s: %d proxy errors", args.config, len(errors))
        return EXIT_INVALID

    if not args.json:
        print(f"{args.config}: {len(proxies)} proxies valid")
    return EXIT_VALID


if __name__ == "__main__":
    sys.exit(main())
