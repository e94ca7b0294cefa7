"""
CLI main application module.

This module contains the main application entry point and the
high-level flow of a provisioning run from the command line.
"""

import logging
import sys

from ..constants import (
    EXIT_SUCCESS,
    EXIT_CONFIG_ERROR,
    EXIT_API_FAILURES,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
)

from ..core import (
    load_ci_context,
    resolve_database_name,
    try_provision,
    write_outputs,
    render_outputs_json,
    report_failure,
)
from ..core.orchestrator import validate_request

from .parser import (
    create_argument_parser,
)

from ..utils import (
    setup_logging,
)

from ..config import ConfigError, Env
from ..config.loader import ConfigLoader
from ..config.schema import ConfigSchema
from ..errors import ErrorKind

logger = logging.getLogger(__name__)


def _exit_code_for(kind: ErrorKind) -> int:
    if kind is ErrorKind.CONFIG:
        return EXIT_CONFIG_ERROR
    return EXIT_API_FAILURES


def run(argv=None) -> int:
    """
    Execute one provisioning run and return the process exit code.

    Args:
        argv: Argument list (defaults to sys.argv[1:])
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        config = ConfigLoader.load(schema=ConfigSchema, cli_args=args)
    except ValueError as e:
        report_failure(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    env = Env.from_config(config)
    logger.debug(f"Configuration: {env.mask()}")

    ci_context = load_ci_context(
        pull_request_number=args.pr_number,
        branch_name=args.branch,
        build_number=args.build_number,
    )
    request = env.to_request(ci_context)

    if args.dry_run:
        try:
            validate_request(request)
        except ConfigError as e:
            report_failure(str(e))
            return EXIT_CONFIG_ERROR
        database_name = resolve_database_name(request.database_name_hint, ci_context)
        logger.info(f"DRY RUN: database name would be {database_name}")
        print(database_name)
        return EXIT_SUCCESS

    outcome = try_provision(request, env=env)
    if not outcome.ok:
        report_failure(str(outcome.error))
        return _exit_code_for(outcome.error_kind)

    result = outcome.result
    try:
        write_outputs(result)
    except OSError as e:
        report_failure(f"Failed to write outputs: {e}")
        return EXIT_UNEXPECTED_ERROR

    if args.json:
        print(render_outputs_json(result))

    logger.info("✅ Database provisioned successfully!")
    logger.info(f"Database name: {result.database_name}")
    logger.info(f"Database ID: {result.database_id}")
    return EXIT_SUCCESS


def main():
    """Main entry point for the script."""
    try:
        exit_code = run()
    except KeyboardInterrupt:
        logger.warning("Provisioning interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        report_failure(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)
    sys.exit(exit_code)
