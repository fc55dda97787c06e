from .dicts import deep_merge, insert_path

__all__ = ["deep_merge", "insert_path"]
