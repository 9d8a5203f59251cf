import logging
import sqlite3
from typing import List

from codegen_core import config
from codegen_core.code_generator import generate
from codegen_core.exceptions import ServiceNotFoundError
from codegen_core.models import Service

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, issuer, secret, auth_type, algorithm, digits, period, hotp_counter"


def get_db_connection(db_file: str = None):
    """Kết nối đến database"""
    conn = sqlite3.connect(db_file or config.DATABASE_FILE)
    conn.row_factory = sqlite3.Row  # Trả về kết quả dạng dictionary
    return conn


def _row_to_service(row) -> Service:
    return Service.from_dict(dict(row))


def add_service(service: Service, db_file: str = None) -> Service:
    """
    Lưu service mới, trả về service kèm id vừa tạo.

    Service phải sinh được mã (có secret, secret Base32 hợp lệ, digits <= 10, ...)
    trước khi được INSERT; lỗi từ generate() được raise nguyên vẹn.
    """
    generate(service, now_millis=0)

    conn = get_db_connection(db_file)
    try:
        cursor = conn.execute(
            """INSERT INTO services (name, issuer, secret, auth_type, algorithm, digits, period, hotp_counter)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                service.name,
                service.issuer,
                service.secret,
                service.auth_type.value,
                service.algorithm.value if service.algorithm else None,
                service.digits,
                service.period,
                service.hotp_counter,
            ),
        )
        conn.commit()
        service_id = cursor.lastrowid
    finally:
        conn.close()

    logger.info("Service '%s' added with id=%d", service.name, service_id)
    return Service.from_dict({**service.to_dict(include_secret=True), "id": service_id})


def get_service(service_id: int, db_file: str = None) -> Service:
    """Lấy service theo id; raise ServiceNotFoundError nếu không có"""
    conn = get_db_connection(db_file)
    try:
        row = conn.execute(f"SELECT {_COLUMNS} FROM services WHERE id = ?", (service_id,)).fetchone()
    finally:
        conn.close()

    if row is None:
        raise ServiceNotFoundError(service_id)
    return _row_to_service(row)


def list_services(db_file: str = None) -> List[Service]:
    """Tất cả service, theo thứ tự tạo"""
    conn = get_db_connection(db_file)
    try:
        rows = conn.execute(f"SELECT {_COLUMNS} FROM services ORDER BY id").fetchall()
    finally:
        conn.close()
    return [_row_to_service(row) for row in rows]


def increment_hotp_counter(service_id: int, db_file: str = None) -> Service:
    """
    Tăng hotp_counter của service thêm 1 (sau khi user dùng mã HOTP hiện tại).

    hotp_counter NULL được hiểu là 1 (giống generator), nên lần tăng đầu tiên cho ra 2.
    """
    conn = get_db_connection(db_file)
    try:
        cursor = conn.execute(
            "UPDATE services SET hotp_counter = COALESCE(hotp_counter, ?) + 1 WHERE id = ?",
            (config.DEFAULT_HOTP_COUNTER, service_id),
        )
        conn.commit()
        updated = cursor.rowcount
    finally:
        conn.close()

    if not updated:
        raise ServiceNotFoundError(service_id)
    service = get_service(service_id, db_file)
    logger.info("Service id=%d hotp_counter -> %d", service_id, service.hotp_counter)
    return service


def delete_service(service_id: int, db_file: str = None) -> None:
    conn = get_db_connection(db_file)
    try:
        cursor = conn.execute("DELETE FROM services WHERE id = ?", (service_id,))
        conn.commit()
        deleted = cursor.rowcount
    finally:
        conn.close()

    if not deleted:
        raise ServiceNotFoundError(service_id)
    logger.info("Service id=%d deleted", service_id)
