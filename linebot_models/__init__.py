"""Models for the LINE Messaging API: webhook events, emojis, demographic filters, flex values and errors."""

__version__ = "0.1.0"

__all__ = [
    "demographic",
    "emoji",
    "errors",
    "event",
    "flex_types",
]