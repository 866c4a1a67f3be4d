from breeze.tables.registry import (
    TABLE_NAMES,
    LookupTable,
    TableRegistry,
    default_registry,
)

__all__ = ["TABLE_NAMES", "LookupTable", "TableRegistry", "default_registry"]
