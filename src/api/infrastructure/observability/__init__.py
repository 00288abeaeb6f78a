"""Observability for shared infrastructure.

Database engines report their lifecycle through ``ConnectionProbe`` rather
than logging directly; the observation context is re-exported so callers
can bind request metadata without reaching into the shared kernel.
"""

from shared_kernel.observability_context import ObservationContext
from infrastructure.observability.probes import (
    ConnectionProbe,
    DefaultConnectionProbe,
)

__all__ = [
    "ConnectionProbe",
    "DefaultConnectionProbe",
    "ObservationContext",
]
