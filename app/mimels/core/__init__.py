"""Core configuration, aggregation and output for mimels."""

from mimels.core.config import BucketOrder, FileConfig, OutputFormat, Settings
from mimels.core.emitter import SortedEmitter
from mimels.core.index import AggregationIndex

__all__ = [
    "AggregationIndex",
    "BucketOrder",
    "FileConfig",
    "OutputFormat",
    "Settings",
    "SortedEmitter",
]
