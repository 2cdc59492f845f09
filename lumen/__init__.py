"""Core engine utilities: vectors, matrices, GUIDs, queues, buffers, pools, logging and thread pools."""

__version__ = "0.1.0"