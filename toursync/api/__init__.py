"""Mini README: Remote tour service access.

Exposes ``TourApiClient``, the only component that talks HTTP. Everything
else depends on its method surface, which keeps tests free of the network.
"""

from .client import API_PREFIX, TourApiClient

__all__ = ["API_PREFIX", "TourApiClient"]
