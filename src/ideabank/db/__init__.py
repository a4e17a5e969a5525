from .connector import ConnectionManager
from .executor import QueryExecutor, Row

__all__ = ["ConnectionManager", "QueryExecutor", "Row"]
