"""
config.py — Hằng số mặc định + cấu hình đọc từ biến môi trường.

- Các giá trị DEFAULT_* là giá trị dùng khi service không khai báo field tương ứng.
- Các biến CODEGEN_* có thể override khi chạy CLI / backend.
"""

import logging
import os

# --- Config / constants ----------------------------------------------------
DEFAULT_DIGITS = 6          # chuẩn: 6 chữ số
DEFAULT_PERIOD = 30         # TOTP step (giây)
DEFAULT_ALGORITHM = "SHA1"  # RFC 6238 mặc định
DEFAULT_HOTP_COUNTER = 1    # counter HOTP khi service chưa có counter

DATABASE_FILE = os.environ.get("CODEGEN_DATABASE_FILE", "database/codegen.db")
TIME_OFFSET_MS = int(os.environ.get("CODEGEN_TIME_OFFSET_MS", "0"))
TIME_DELTA_MS = int(os.environ.get("CODEGEN_TIME_DELTA_MS", "0"))
LOG_LEVEL = os.environ.get("CODEGEN_LOG_LEVEL", "INFO")

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """
    Bật logging cho CLI / backend.

    Arguments:
        verbose: True -> DEBUG, ngược lại dùng CODEGEN_LOG_LEVEL
    """
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
