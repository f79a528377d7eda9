import pluggy

from hydrophone.plugins import hookspecs

hookimpl = pluggy.HookimplMarker("hydrophone")


def initialize_plugin_manager():
    """
    Initializes and loads all default and setup implementations for registered plugins

    @return: initialized plugin manager
    """
    pm = pluggy.PluginManager("hydrophone")
    pm.add_hookspecs(hookspecs)
    pm.load_setuptools_entrypoints("hydrophone")

    # default registration of builtin implemented plugins
    from hydrophone.conf import parser

    pm.register(parser)

    return pm
