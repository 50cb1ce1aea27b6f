"""pyglob observability package.

Re-exports the metrics collector for convenient access::

    from pyglob.observability import MetricsCollector
"""

from pyglob.observability.metrics import MetricsCollector

__all__ = [
    "MetricsCollector",
]
