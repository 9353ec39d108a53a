#!/usr/bin/env python3
"""Queries path information from the command line.

Prints the result of a single path query to stdout, and exits with status 1
if the query fails or yields nothing, e.g. the parent of 'mod.rs'.

Examples:
    $ fsbox basename ./src/path/mod.rs
    mod.rs
    $ fsbox canonicalize ./missing --fallback ./missing
    ./missing
    $ fsbox tempfile txt
    /tmp/tmpk2xo1nbc.txt

Changelog:
    2026-10-17 Justin: Init
"""

import sys

import fsbox.logging
import fsbox.scriptutil
from fsbox import path
from fsbox.error import FsIOError

logger = fsbox.logging.get_logger(__name__)
package_logger = fsbox.logging.get_logger("fsbox")

OPERATIONS = ("canonicalize", "basename", "parent", "tempfile")


def make_parser(help_verbosity: int = 1):
    adv = fsbox.scriptutil.get_help_descriptor(help_verbosity >= 2)  # noqa: PLR2004
    parser = fsbox.scriptutil.generate_default_parser(
        __doc__, script_name="fsbox", display_config=help_verbosity >= 2,  # noqa: PLR2004
    )
    fsbox.scriptutil.add_boilerplate_arguments(parser, adv=adv)

    # fmt: off
    pgroup = parser.add_argument_group("query")
    pgroup.add_argument(
        "operation", nargs="?", choices=OPERATIONS,
        help="Query to perform, one of {%(choices)s}")
    pgroup.add_argument(
        "value", nargs="?",
        help="Path to query, or file extension for 'tempfile'")
    pgroup.add_argument(
        "--fallback", metavar="",
        help="Printed instead of failing if 'canonicalize' fails")
    # fmt: on
    return parser


def run(operation, value, fallback=None):
    """Returns the query result, or None if there is none."""
    if operation == "canonicalize":
        if fallback is not None:
            return path.canonicalize_or(value, fallback)
        return path.canonicalize_as_string(value)
    if operation == "basename":
        return path.get_basename(value)
    if operation == "parent":
        return path.get_parent_directory(value)
    if operation == "tempfile":
        return path.get_temporary_file_path(value)
    raise ValueError(f"Unrecognized operation '{operation}'")


def main(argv=None):
    # Parse arguments and configure logging
    parser = make_parser()
    args = fsbox.scriptutil.parse_args_or_help(parser, argv, parser_func=make_parser)
    kwargs = {}
    if args.quiet:
        kwargs["stream"] = None
    fsbox.logging.set_default_handlers(package_logger, file=args.logging, **kwargs)
    fsbox.logging.set_logging_level(package_logger, args.verbosity)
    logger.debug("%s", args)

    if args.operation is None or args.value is None:
        parser.error("both 'operation' and 'value' are required")

    try:
        result = run(args.operation, args.value, args.fallback)
    except FsIOError as e:
        logger.error("%s", e)
        sys.exit(1)

    if result is None:
        logger.info("'%s' has no %s", args.value, args.operation)
        sys.exit(1)
    print(result)


if __name__ == "__main__":
    main()
