"""Line-at-a-time reading from file descriptors with per-descriptor buffering."""

__version__ = "1.0.0"
__all__ = ["reader"]