from .types import ConcurrentModificationError, Graph, Layout, PickBusyError, Point, Shape
from .geometry import Polygon, Rectangle, segment_distance_sq, squared_distance
from .graph import SimpleGraph
from .layout import LayoutSnapshot, StaticLayout
from .adapters import NetworkXLayout
from .config import (
    DEFAULT_MAX_DISTANCE,
    DEFAULT_MAX_RETRIES,
    AccessorConfig,
    get_accessor_config,
    set_accessor_config,
)
from .accessor import ElementAccessor, RadiusElementAccessor

__all__ = [
    'ConcurrentModificationError',
    'PickBusyError',
    'Graph',
    'Layout',
    'Shape',
    'Point',
    'Polygon',
    'Rectangle',
    'segment_distance_sq',
    'squared_distance',
    'SimpleGraph',
    'StaticLayout',
    'LayoutSnapshot',
    'NetworkXLayout',
    'DEFAULT_MAX_DISTANCE',
    'DEFAULT_MAX_RETRIES',
    'AccessorConfig',
    'get_accessor_config',
    'set_accessor_config',
    'ElementAccessor',
    'RadiusElementAccessor',
]
