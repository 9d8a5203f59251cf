"""
FLASK APP - CODE GENERATOR BACKEND
==================================

Thiết lập Flask app, bật CORS, đăng ký blueprint /api và tạo database.

Chạy:
    python -m codegen_backend.app
"""
import logging

from flask import Flask, jsonify
from flask_cors import CORS

from codegen_core import config
from codegen_core.time_provider import SystemTimeProvider
from codegen_database import setup_database

from .routes import codes_bp

logger = logging.getLogger(__name__)


def create_app(overrides: dict = None) -> Flask:
    """
    Tạo Flask app.

    Arguments:
        overrides: config ghi đè, ví dụ {"DATABASE_FILE": ..., "TIME_PROVIDER": ...}
    """
    app = Flask(__name__)
    app.config.update(
        DATABASE_FILE=config.DATABASE_FILE,
        TIME_PROVIDER=SystemTimeProvider(),
    )
    if overrides:
        app.config.update(overrides)

    # Cho phép frontend (domain/port khác) gọi API
    CORS(app)

    app.register_blueprint(codes_bp)
    setup_database(app.config["DATABASE_FILE"])

    @app.route('/', methods=['GET'])
    def index():
        return jsonify({
            "name": "codegen",
            "endpoints": [
                "POST /api/code",
                "GET /api/services",
                "POST /api/services",
                "GET /api/services/<id>",
                "POST /api/services/<id>/hotp/next",
                "DELETE /api/services/<id>",
            ],
        })

    logger.info("App created (database=%s)", app.config["DATABASE_FILE"])
    return app


def main():
    config.configure_logging()
    app = create_app()
    app.run(host='0.0.0.0', port=5000)


if __name__ == '__main__':
    main()
