"""Little-endian binary serialization helpers and a worker thread pool for game tooling."""

__version__ = "0.1.0"
__all__ = ["binary", "threadpool"]