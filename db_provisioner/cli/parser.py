"""
CLI argument parser module.

The parser is generated from the configuration schema so every
configuration field is also available as a command-line flag.
"""

from ..config.loader import ConfigLoader


def create_argument_parser():
    """
    Create and configure the argument parser.

    This uses the schema-driven ConfigLoader to generate the parser
    from the configuration schema.
    """
    return ConfigLoader.generate_cli_parser()
