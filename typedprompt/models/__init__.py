from .target import ConversionError, StreamError, TargetType

__all__ = ["ConversionError", "StreamError", "TargetType"]
