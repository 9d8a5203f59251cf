import logging
import os
import sqlite3

from codegen_core import config

logger = logging.getLogger(__name__)


def setup_database(db_file: str = None):
    """Tạo database và bảng services nếu chưa có"""
    db_file = db_file or config.DATABASE_FILE

    # Đảm bảo thư mục tồn tại
    directory = os.path.dirname(db_file)
    if directory:
        os.makedirs(directory, exist_ok=True)

    conn = sqlite3.connect(db_file)
    cursor = conn.cursor()

    # Mỗi row là một service; các cột cấu hình OTP có thể NULL (= dùng mặc định)
    cursor.execute('''
    CREATE TABLE IF NOT EXISTS services (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL DEFAULT '',
        issuer TEXT,
        secret TEXT NOT NULL,
        auth_type TEXT NOT NULL DEFAULT 'TOTP',
        algorithm TEXT,
        digits INTEGER,
        period INTEGER,
        hotp_counter INTEGER,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    ''')

    conn.commit()
    conn.close()
    logger.info("Database setup completed: %s", db_file)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)
    setup_database()
