import pluggy
from argparse import ArgumentParser

from hydrophone.conf import Config

hookspec = pluggy.HookspecMarker("hydrophone")


@hookspec
def parser_add_arguments(parser: ArgumentParser, output_dir: str):
    """Add arguments to the ArgumentParser.

    If a plugin requires an aditional argument, it should implement this hook
    and add the argument to the Argument Parser

    @param parser: an ArgumentParser, calls parser.add_argument on it
    @param output_dir: the default output directory (current working directory)
    """


@hookspec
def load_plugin(config: Config):
    """Plugins that wish to execute code after the configuration is loaded
    should implement this hook.

    @param config: the loaded hydrophone Config
    """
