"""Room-based chat: a console client and in-memory server-side state."""

__version__ = "0.1.0"