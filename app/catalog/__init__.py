"""Static machine catalog (read-only lookup table)."""

from app.catalog.machine_catalog import (
    MACHINE_CATALOG,
    all_machines,
    equivalents_for,
    get_machine,
)
from app.catalog.machine_profile import LoadScheme, MachineInfo

__all__ = [
    "MACHINE_CATALOG",
    "LoadScheme",
    "MachineInfo",
    "all_machines",
    "equivalents_for",
    "get_machine",
]
