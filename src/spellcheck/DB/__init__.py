from .api import DictionaryStore, make_store
from .memory_store import MemoryStore
from .file_store import FileStore

__all__ = ["DictionaryStore", "make_store", "MemoryStore", "FileStore"]
