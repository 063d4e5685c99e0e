"""stdshims — small convenience functions over standard-library types."""

__version__ = "0.1.0"
