"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to automatically load, validate, and merge configuration from multiple sources.
"""

import logging
import os
import typing
from typing import Dict, Any, Optional
from argparse import ArgumentParser, Namespace

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import ConfigSchema


logger = logging.getLogger(__name__)


def _field_extra(field_info) -> Dict[str, Any]:
    return field_info.json_schema_extra or {}


def _clean_value(value: Any) -> Any:
    """Strip strings; an explicit empty string clears the value."""
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    return value


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env.local file (if it exists)
        3. OS environment variables
        4. CLI arguments (highest priority)

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)

        Returns:
            Validated configuration instance

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        # Step 1: Load from .env.local file into the process environment
        _load_from_dotenv_file()

        # Step 2: Load from environment variables based on schema
        for field_name, field_info in schema.model_fields.items():
            env_var = _field_extra(field_info).get("env_var")
            if env_var:
                env_value = os.getenv(env_var)
                if env_value is not None:
                    # Empty strings fall through to the default
                    stripped = env_value.strip()
                    if stripped:
                        config_dict[field_name] = stripped

        # Step 3: Apply CLI arguments
        if cli_args:
            for field_name, field_info in schema.model_fields.items():
                cli_arg = _field_extra(field_info).get("cli_arg")
                if cli_arg and hasattr(cli_args, cli_arg):
                    cli_value = getattr(cli_args, cli_arg)
                    if cli_value is not None:
                        config_dict[field_name] = _clean_value(cli_value)

        # Drop cleared values so schema defaults apply
        config_dict = {k: v for k, v in config_dict.items() if v is not None}

        # Step 4: Create and validate the configuration
        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else "config"
                msg = error["msg"]
                field_info = schema.model_fields.get(field)
                env_var = _field_extra(field_info).get("env_var") if field_info else str(field).upper()
                errors.append(f"{env_var}: {msg}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ValueError(error_msg) from e

    @staticmethod
    def generate_cli_parser(
        schema: type[ConfigSchema] = ConfigSchema,
        description: str = "Provision or reuse a hosted Postgres database for a CI run",
    ) -> ArgumentParser:
        """
        Generate an ArgumentParser from the configuration schema.

        Args:
            schema: The configuration schema class
            description: Parser description

        Returns:
            Configured ArgumentParser
        """
        parser = ArgumentParser(
            prog="db-provisioner",
            description=description,
            epilog="""
Examples:
  db-provisioner --service-token $TOKEN --project-id proj_123
  db-provisioner --project-id proj_123 --database-name preview-db --region us-east-1
  db-provisioner --project-id proj_123 --pr-number 42 --branch feature/login --dry-run
            """,
        )

        # CLI-only arguments that don't map to config
        parser.add_argument(
            "--pr-number",
            type=int,
            default=None,
            help="Pull request number (overrides the GitHub event payload)",
        )
        parser.add_argument(
            "--branch",
            default=None,
            help="Pull request head branch (overrides the GitHub event payload)",
        )
        parser.add_argument(
            "--build-number",
            type=int,
            default=None,
            help="Build/run number (overrides GITHUB_RUN_NUMBER)",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Resolve and print the database name without calling the provider",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the outputs as JSON on stdout",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Enable verbose logging (DEBUG level)",
        )

        # Schema-based arguments
        for field_name, field_info in schema.model_fields.items():
            extra = _field_extra(field_info)
            cli_arg = extra.get("cli_arg")
            if not cli_arg:
                continue

            arg_name = f"--{cli_arg.replace('_', '-')}"

            kwargs = {
                "help": field_info.description or f"Override {extra.get('env_var', field_name.upper())} env var",
                "default": None,  # Defaults are applied by the loader
            }

            field_type = field_info.annotation

            # Unwrap Optional[X]
            if typing.get_origin(field_type) is typing.Union:
                non_none_args = [arg for arg in typing.get_args(field_type) if arg is not type(None)]
                if len(non_none_args) == 1:
                    field_type = non_none_args[0]

            if field_type == int:
                kwargs["type"] = int
            elif field_type == float:
                kwargs["type"] = float

            parser.add_argument(arg_name, **kwargs)

        return parser


def _load_from_dotenv_file() -> None:
    """Load values from .env.local file without overriding the environment."""
    if os.path.exists(".env.local"):
        load_dotenv(".env.local", override=False)
        logger.debug("Loaded configuration from .env.local file")
    else:
        logger.debug(".env.local file not found, skipping")
