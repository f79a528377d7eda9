import os
from argparse import ArgumentParser

from hydrophone.conf import (
    Config,
    DEFAULT_BUSYBOX_IMAGE,
    DEFAULT_CONFORMANCE_IMAGE,
    DEFAULT_PARALLEL,
    DEFAULT_VERBOSITY,
)
from hydrophone.core.errors import InvalidArgumentError, MissingArgumentError, WorkingDirectoryError
from hydrophone.plugins import hookimpl


@hookimpl
def parser_add_arguments(parser, output_dir):
    """
    This is the default hook implementation for parse_add_argument
    Contains initialization for all default arguments
    """
    parser.add_argument(
        "--focus",
        type=str,
        default="",
        help="Focus runs a specific e2e test, e.g. sig-auth. Allows regular expressions.",
    )

    parser.add_argument("--skip", type=str, default="", help="Skip specific tests. Allows regular expressions.")

    parser.add_argument(
        "--conformance-image",
        type=str,
        default=DEFAULT_CONFORMANCE_IMAGE,
        help="Conformance container image of your choice",
    )

    parser.add_argument(
        "--busybox-image",
        type=str,
        default=DEFAULT_BUSYBOX_IMAGE,
        help="Alternate busybox container image",
    )

    parser.add_argument("--kubeconfig", type=str, default="", help="Path to the kubeconfig file")

    parser.add_argument(
        "--parallel",
        type=int,
        default=DEFAULT_PARALLEL,
        help="Number of parallel threads in test framework",
    )

    parser.add_argument("--verbosity", type=int, default=DEFAULT_VERBOSITY, help="Verbosity of test framework")

    parser.add_argument("--output-dir", type=str, default=output_dir, help="Directory for logs")

    parser.add_argument(
        "--log",
        type=str,
        metavar="LOGLEVEL",
        default="INFO",
        help="Set log level of hydrophone itself, options are: debug, info, warn, none",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path to a log file to output all logs to",
    )


def parse_args(add_args_hook, argv=None, output_dir=None):
    """
    Function handles all argument parsing

    @param add_args_hook: hook for adding arguments to it's given ArgumentParser parameter
    @param argv: arguments to parse, defaults to sys.argv[1:]
    @param output_dir: default for --output-dir
    @return: parsed arguments namespace
    """
    parser = ArgumentParser(description="hydrophone - run the Kubernetes conformance tests against a cluster")
    # adding all arguments to the parser
    add_args_hook(parser=parser, output_dir=output_dir)

    return parser.parse_args(argv)


def init_args(argv=None, add_args_hook=None):
    """
    Loads the run configuration from the command line

    @raise ConfigError: a required argument is missing or a value is out of range
    @return: frozen Config
    """
    try:
        output_dir = os.getcwd()
    except OSError as ex:
        raise WorkingDirectoryError(ex) from ex

    args = parse_args(add_args_hook or parser_add_arguments, argv=argv, output_dir=output_dir)

    if not args.focus:
        raise MissingArgumentError("focus", "use '[Conformance]' to run all conformance tests")
    if args.parallel < 1:
        raise InvalidArgumentError("parallel", args.parallel, "must be at least 1")

    return Config(
        focus=args.focus,
        skip=args.skip,
        conformance_image=args.conformance_image,
        busybox_image=args.busybox_image,
        kubeconfig=args.kubeconfig or None,
        parallel=args.parallel,
        verbosity=args.verbosity,
        output_dir=args.output_dir,
        log_level=args.log,
        log_file=args.log_file,
    )
