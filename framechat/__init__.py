"""Length-prefixed JSON chat framing, a task runner and a terminal chat client."""

__version__ = "0.1.0"