"""Storage configurations."""

from semdex.configuration.storage.local import LocalStorage
from semdex.configuration.storage.postgres import PostgresStorage

__all__ = ["LocalStorage", "PostgresStorage"]
