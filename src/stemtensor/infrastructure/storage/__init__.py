from ._native_storage import NativeStorage, ColumnMajorStorage

__all__ = [NativeStorage.__name__, ColumnMajorStorage.__name__]
