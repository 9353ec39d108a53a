import argparse
import pathlib
import re
import sys

import configargparse


# https://stackoverflow.com/a/23941599
class ArgparseCustomFormatter(argparse.RawDescriptionHelpFormatter):
    """Shows '-s, --long ARGS' instead of '-s ARGS, --long ARGS'.

    Help text prefixed with 'rawtext|' is printed with newlines preserved.
    """

    RAW_INDICATOR = "rawtext|"

    def _format_action_invocation(self, action):
        if not action.option_strings:
            (metavar,) = self._metavar_formatter(action, action.dest)(1)
            return metavar
        if action.nargs == 0:
            return ", ".join(action.option_strings)
        args_string = self._format_args(action, action.dest.upper())
        return ", ".join(action.option_strings) + f" {args_string}"

    def _split_lines(self, text, width):
        marker = ArgparseCustomFormatter.RAW_INDICATOR
        if text.startswith(marker):
            return text[len(marker) :].splitlines()
        return super()._split_lines(text, width)


def generate_default_parser(moduledoc, script_name=None, display_config=True):
    if script_name is None:
        script_name = pathlib.Path(sys.argv[0]).name
    parser = configargparse.ArgumentParser(
        add_config_file_help=display_config,
        default_config_files=[f"{script_name}.default.conf"],
        description=parse_docstring_description(moduledoc),
        formatter_class=ArgparseCustomFormatter,
        add_help=False,
    )
    return parser


def add_boilerplate_arguments(parser, adv=None):
    """
    Adds '-hvL --quiet --config --save'.

    'adv' optionally wraps help text of the less common options, see
    'get_help_descriptor'.
    """
    if adv is None:
        adv = get_help_descriptor(True)

    pgroup_config = parser.add_argument_group("display/configuration")
    pgroup_config.add_argument(
        "-h", "--help", action="count", default=0,
        help="Show this help message, with incremental verbosity, e.g. -hh")
    pgroup_config.add_argument(
        "-v", "--verbosity", action="count", default=0,
        help="Specify debug verbosity, e.g. -vv for more verbosity")
    pgroup_config.add_argument(
        "-L", "--logging", metavar="",
        help=adv("Log to file, if specified. Log level follows verbosity."))
    pgroup_config.add_argument(
        "--quiet", action="store_true",
        help=adv("Suppress errors, but will not block logging"))
    pgroup_config.add_argument(
        "--config", metavar="", is_config_file_arg=True,
        help=adv("Path to configuration file"))
    pgroup_config.add_argument(
        "--save", metavar="", is_write_out_config_file_arg=True,
        help=adv("Path to configuration file for saving, then immediately exit"))
    return pgroup_config


def get_help_descriptor(display=False):
    """Returns a descriptor that is suppressed if insufficient verbosity.

    Example:
        >>> adv  = get_help_descriptor(help_verbosity >= 2)
        >>> parser.add_argument("-h", action="count", default=0)
        >>> parser.add_argument("-a", help=adv("parameter a"))

        user:~$ fsbox -h    # hides help text for parameter a
        user:~$ fsbox -hh   # shows help text for parameter a
    """

    def advanced_help(description):
        return description if display else configargparse.SUPPRESS

    return advanced_help


def parse_args_or_help(parser, argv=None, parser_func=None):
    """Boilerplate to parse arguments and print help if needed.

    Exits with status 1 after printing help, when '-h' is supplied or when
    neither arguments nor a configuration file were provided.
    """
    if argv is None:
        argv = sys.argv[1:]

    # Parse arguments - this must come before 'parser.get_source...'
    args = parser.parse_args(argv)

    # Check whether options have been supplied, and print help otherwise
    args_sources = parser.get_source_to_settings_dict().keys()
    config_supplied = any(map(lambda x: x.startswith("config_file"), args_sources))
    if getattr(args, "help", 0) or (len(argv) == 0 and not config_supplied):
        if parser_func:
            parser = parser_func(max(1, getattr(args, "help", 1)))
        parser.print_help(sys.stderr)
        sys.exit(1)

    return args


def parse_docstring_description(docstring):
    placeholder = "~~~PLACEHOLDER~~~"
    # Remove all changelog information
    d = docstring.partition("Changelog:")[0]

    # Replace all newlines except the first
    d = re.sub(r"\n+", placeholder, d, count=1)
    d = re.sub(r"\n+", " ", d)
    d = re.sub(placeholder, "\n\n", d)
    return d
