"""Float ordering and extrema helpers."""

from .extrema import compare_floats as compare_floats
from .extrema import max_value as max_value
from .extrema import min_value as min_value
