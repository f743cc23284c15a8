"""Population genetics of mutation and epigenetic plasticity under threshold selection."""

from .config import SimulationParameters  # noqa: F401
from .selection import SelectionPolicy  # noqa: F401
from .simulation import Simulation  # noqa: F401
