class HydrophoneError(Exception):
    """Base class for every failure that should stop a hydrophone run"""


class ConfigError(HydrophoneError):
    """
    This exception is raised while loading the configuration (e.g. a required flag is missing).
    The caller may print usage and exit.
    """


class MissingArgumentError(ConfigError):
    def __init__(self, argument, hint=None):
        self.argument = argument
        message = f"missing --{argument} argument"
        if hint:
            message += f" ({hint})"
        super().__init__(message)


class InvalidArgumentError(ConfigError):
    def __init__(self, argument, value, reason):
        self.argument = argument
        self.value = value
        super().__init__(f"invalid --{argument} value {value!r}: {reason}")


class WorkingDirectoryError(ConfigError):
    """Current working directory could not be determined"""

    def __init__(self, exc=None):
        self.wrapped_exc = exc
        super().__init__(f"unable to determine current working directory: {exc}")


class ClusterError(HydrophoneError):
    pass


class ClusterConnectionError(ClusterError):
    """No usable kubeconfig or in-cluster configuration could be loaded"""


class ClusterVersionError(ClusterError):
    """
    This exception is raised when the API server can not report its version (e.g. unreachable, 403).
    A conformance run can not proceed without an identified cluster.
    """

    def __init__(self, exc=None):
        self.wrapped_exc = exc
        super().__init__(str(exc))


class OutputDirectoryError(HydrophoneError):
    def __init__(self, path, exc=None):
        self.path = path
        self.wrapped_exc = exc
        super().__init__(f"unable to create output directory [{path}]: {exc}")
