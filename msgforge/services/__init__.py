"""
Processor services combining renderers with transport collaborators.
"""

from .processors import (
    DataProcessorService,
    ContainerStatusProcessorService,
    FixedWidthContainerProcessorService,
    FlexibleProcessorService,
)

__all__ = [
    "DataProcessorService",
    "ContainerStatusProcessorService",
    "FixedWidthContainerProcessorService",
    "FlexibleProcessorService",
]
