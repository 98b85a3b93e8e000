"""Status reporting for the FunCube Dongle Pro+ software-defined radio."""

from .dongle import FunCubeDongle
from .models.status import DongleStatus

__version__ = "0.1.0"
