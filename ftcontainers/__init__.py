"""Double-ended queue with stack, queue and priority-queue adaptors and cursors."""

__version__ = "0.1.0"