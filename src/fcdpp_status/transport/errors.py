class FunCubeError(Exception):
    """Base class for every error raised while talking to the dongle."""
    pass


class DiscoveryError(FunCubeError, ConnectionError):
    """Raised when device enumeration does not yield exactly one dongle."""
    pass


class DeviceNotFoundError(DiscoveryError):
    """Raised when no matching dongle could be found."""
    pass


class MultipleDevicesError(DiscoveryError):
    """Raised when more than one matching dongle is found."""
    def __init__(self, message, devices):
        super().__init__(message)
        self.devices = devices  # list[DeviceInfo]


class DeviceOpenError(FunCubeError, ConnectionError):
    """Raised when the matching dongle cannot be opened or claimed."""
    pass


class TransportError(FunCubeError, IOError):
    """Raised when a report write or read fails."""
    pass
