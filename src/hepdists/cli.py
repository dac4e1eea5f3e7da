"""
hepdists's command line interface utilities.
"""

import argparse
import logging
import sys

import hepdists
import hepdists.logging
from hepdists.math.distribution_selector import load_distribution

log = logging.getLogger(__name__)


def hepdists_cli(argv=None):
    """hepdists's command line interface.

    Defines the command line interface (CLI) of the package, which exposes the
    distribution functions to the console.  This function is added to the
    ``entry_points.console_scripts`` list and defines the ``hepdists``
    executable (see ``setuptools``' documentation). To learn more about the
    CLI, have a look at the help section:

    .. code-block:: console

      $ hepdists --help
      $ hepdists eval --help  # help section for a specific sub-command
    """

    parser = argparse.ArgumentParser(
        prog="hepdists", description="hepdists's command-line interface"
    )

    # global options
    parser.add_argument(
        "--version", action="store_true", help="""Print hepdists version and exit"""
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="""Increase the program verbosity""",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="""Increase the program verbosity to maximum""",
    )

    subparsers = parser.add_subparsers()

    add_eval_parser(subparsers)
    add_sample_parser(subparsers)

    if argv is None:
        argv = sys.argv[1:]

    if len(argv) < 1:
        parser.print_usage(sys.stderr)
        sys.exit(1)

    args = parser.parse_args(argv)

    if args.verbose:
        hepdists.logging.setup(logging.DEBUG)
    elif args.debug:
        hepdists.logging.setup(logging.DEBUG, logging.root)
    else:
        hepdists.logging.setup()

    if args.version:
        print(hepdists.__version__)  # noqa: T201
        sys.exit()

    args.func(args)


def add_eval_parser(subparsers):
    """Configure the ``eval`` sub-command"""

    parser_eval = subparsers.add_parser(
        "eval",
        description="""Evaluate a distribution function at the given points,
                       printing one result per line""",
    )
    parser_eval.add_argument(
        "values",
        nargs="+",
        type=float,
        help="""Points to evaluate at. Probabilities for quantile""",
    )
    parser_eval.add_argument(
        "--config",
        "-c",
        required=True,
        help="""JSON/YAML file holding the distribution name and parameters""",
    )
    parser_eval.add_argument(
        "--function",
        "-f",
        default="pdf",
        choices=["pdf", "logpdf", "cdf", "sf", "quantile"],
        help="""Function to evaluate. Default is pdf""",
    )

    parser_eval.set_defaults(func=eval_cli)


def add_sample_parser(subparsers):
    """Configure the ``sample`` sub-command"""

    parser_sample = subparsers.add_parser(
        "sample",
        description="""Draw random numbers from a distribution, printing one
                       per line""",
    )
    parser_sample.add_argument(
        "--config",
        "-c",
        required=True,
        help="""JSON/YAML file holding the distribution name and parameters""",
    )
    parser_sample.add_argument(
        "--size",
        "-n",
        default=1,
        type=int,
        help="""Number of samples to draw. Default is 1""",
    )
    parser_sample.add_argument(
        "--seed",
        "-s",
        default=None,
        type=int,
        help="""Seed of the random number generator""",
    )

    parser_sample.set_defaults(func=sample_cli)


def eval_cli(args):
    """Passes command line arguments to the distribution's functions."""

    dist = load_distribution(args.config)
    log.info(f"evaluating {args.function} of {dist}")

    for value in getattr(dist, args.function)(args.values):
        print(value)  # noqa: T201


def sample_cli(args):
    """Passes command line arguments to the distribution's ``rvs``."""

    dist = load_distribution(args.config)
    log.info(f"drawing {args.size} samples from {dist}")

    for value in dist.rvs(args.size, random_state=args.seed):
        print(value)  # noqa: T201
