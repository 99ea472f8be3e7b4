"""Line sequence helpers and text file sources/sinks."""

from .lines import join_lines, split_lines

__all__ = ["join_lines", "split_lines"]
