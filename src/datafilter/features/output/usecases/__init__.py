"""Output use cases: path planning and writing."""

from .output_writer import OutputWriter
from .path_planner import PathPlanner

__all__ = ["OutputWriter", "PathPlanner"]
