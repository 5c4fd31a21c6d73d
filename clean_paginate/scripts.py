"""Generate a paginated client module and type stubs from SQLAlchemy metadata."""
import argparse
import importlib
import logging

from sqlalchemy import MetaData

from .generator import generate
from .generator import MANIFEST
from .generator import models_from_metadata

logger = logging.getLogger(__name__)


def get_parser():
    """Return argument parser."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        default=False,
        help="Verbose output",
    )
    parser.add_argument(
        "metadata",
        metavar="MODULE:ATTRIBUTE",
        help="Import path of a SQLAlchemy MetaData, e.g. 'myapp.tables:metadata'",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        default=MANIFEST.default_output,
        help=f"Output directory (default: {MANIFEST.default_output})",
    )
    return parser


def load_metadata(path: str) -> MetaData:
    module_name, _, attribute = path.partition(":")
    if not attribute:
        raise ValueError(f"Expected MODULE:ATTRIBUTE, got '{path}'")
    result = getattr(importlib.import_module(module_name), attribute)
    if not isinstance(result, MetaData):
        raise TypeError(f"'{path}' is not a sqlalchemy.MetaData")
    return result


def main(argv=None):
    """Call main command with args from parser.

    This method is called when you run 'bin/clean-paginate-generate',
    this is configured in 'pyproject.toml'.

    """
    options = get_parser().parse_args(argv)
    if options.verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    try:
        models = models_from_metadata(load_metadata(options.metadata))
        generate(models, options.output)
    except Exception:
        logger.exception("An exception has occurred.")
        return 1
    logger.info("%s: generated %d models", MANIFEST.pretty_name, len(models))
    return 0
