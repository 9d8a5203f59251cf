"""SQLite storage cho danh sách service (secret + cấu hình OTP + hotp_counter)."""

from .db_manager import (
    add_service,
    delete_service,
    get_service,
    increment_hotp_counter,
    list_services,
)
from .setup_database import setup_database

__all__ = [
    "add_service",
    "delete_service",
    "get_service",
    "increment_hotp_counter",
    "list_services",
    "setup_database",
]
