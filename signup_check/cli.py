"""Command-line interface for the sign-up check."""

from __future__ import annotations

import argparse
import json

from .browser import BrowserConfig
from .config import SiteConfig
from .io_utils import generate_run_id, prepare_run_directories, write_json
from .logging_utils import build_logger
from .scenario import ScenarioInputs, run_sign_up_scenario
from .sign_up_data import DEFAULT_COUNTRY_QUERY, build_sign_up_data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fill and submit the account sign-up form end to end"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run the sign-up scenario")
    run_parser.add_argument(
        "--base-url", help="Application base URL (defaults to $SIGNUP_CHECK_BASE_URL)"
    )
    run_parser.add_argument(
        "--country-query",
        default=DEFAULT_COUNTRY_QUERY,
        help="Text typed into the country field",
    )
    run_parser.add_argument(
        "--expect-country",
        help="Country code the registration request must carry, e.g. SE",
    )
    run_parser.add_argument(
        "--headed", action="store_true", help="Show the browser window"
    )
    run_parser.add_argument("--run-id", dest="run_id", help="Optional run identifier")
    run_parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    run_id = args.run_id or generate_run_id()
    run_paths = prepare_run_directories(run_id, args.command)
    logger = build_logger(run_paths, verbose=args.verbose)

    if args.command == "run":
        inputs = ScenarioInputs(
            site=SiteConfig.from_env(args.base_url),
            run_paths=run_paths,
            logger=logger,
            data=build_sign_up_data(country_query=args.country_query),
            expected_country_code=args.expect_country,
            browser=BrowserConfig(headless=not args.headed),
        )
        result = run_sign_up_scenario(inputs)
    else:
        parser.error(f"Unknown command: {args.command}")

    write_json(run_paths.summary_path, result)
    print(json.dumps(result, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
