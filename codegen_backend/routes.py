"""
CODE GENERATOR API ROUTES - FLASK BLUEPRINT

Các endpoint trả về service kèm `code` (current / next / timer / progress).
Secret không bao giờ được trả ra trong response.

VÍ DỤ:
curl -X POST http://localhost:5000/api/code -H "Content-Type: application/json" \
     -d '{"secret": "JBSWY3DPEHPK3PXP", "auth_type": "TOTP"}'
curl http://localhost:5000/api/services
curl -X POST http://localhost:5000/api/services/1/hotp/next
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from codegen_core.code_generator import ServiceCodeGenerator
from codegen_core.exceptions import ServiceNotFoundError
from codegen_core.models import AuthType, Service
from codegen_core.time_provider import FixedTimeProvider
from codegen_database import db_manager

logger = logging.getLogger(__name__)

codes_bp = Blueprint('codes', __name__, url_prefix='/api')


def _generator() -> ServiceCodeGenerator:
    return ServiceCodeGenerator(current_app.config["TIME_PROVIDER"])


def _db_file() -> str:
    return current_app.config["DATABASE_FILE"]


@codes_bp.errorhandler(ServiceNotFoundError)
def handle_not_found(error):
    return jsonify({"error": str(error)}), 404


@codes_bp.errorhandler(ValueError)
def handle_invalid(error):
    # MissingSecretError, enum/int parse errors, Base32 decode errors (binascii.Error)
    logger.warning("Rejected request: %s", error)
    return jsonify({"error": str(error)}), 400


@codes_bp.route('/code', methods=['POST'])
def generate_code():
    """
    SINH MÃ CHO MỘT SERVICE (không lưu gì)

    Input (JSON body):
      {
        "secret": "JBSWY3DPEHPK3PXP",   # BẮT BUỘC
        "auth_type": "TOTP",            # TOTP | HOTP
        "algorithm": "SHA1",            # mặc định SHA1
        "digits": 6, "period": 30, "hotp_counter": 1,
        "now_millis": 1700000000000,    # tùy chọn - cố định thời điểm
        "clock_delta_millis": 0         # tùy chọn - dùng cùng now_millis
      }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify({"error": "JSON object required"}), 400

    service = Service.from_dict(data)
    if data.get("now_millis") is not None:
        provider = FixedTimeProvider(int(data["now_millis"]), int(data.get("clock_delta_millis") or 0))
        generator = ServiceCodeGenerator(provider)
    else:
        generator = _generator()

    return jsonify(generator.generate(service).to_dict())


@codes_bp.route('/services', methods=['GET'])
def list_services():
    services = _generator().generate_all(db_manager.list_services(_db_file()))
    return jsonify({"services": [s.to_dict() for s in services]})


@codes_bp.route('/services', methods=['POST'])
def create_service():
    """Lưu service mới. Body giống /api/code (không có now_millis)."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify({"error": "JSON object required"}), 400

    service = db_manager.add_service(Service.from_dict(data), _db_file())
    return jsonify(_generator().generate(service).to_dict()), 201


@codes_bp.route('/services/<int:service_id>', methods=['GET'])
def get_service(service_id):
    service = db_manager.get_service(service_id, _db_file())
    return jsonify(_generator().generate(service).to_dict())


@codes_bp.route('/services/<int:service_id>/hotp/next', methods=['POST'])
def next_hotp_code(service_id):
    """
    TĂNG COUNTER HOTP

    Generator không tự tăng counter; endpoint này tăng hotp_counter trong database
    rồi trả về mã mới (current mới = next cũ).
    """
    service = db_manager.get_service(service_id, _db_file())
    if service.auth_type is not AuthType.HOTP:
        return jsonify({"error": f"Service {service_id} is not a HOTP service"}), 400

    service = db_manager.increment_hotp_counter(service_id, _db_file())
    return jsonify(_generator().generate(service).to_dict())


@codes_bp.route('/services/<int:service_id>', methods=['DELETE'])
def delete_service(service_id):
    db_manager.delete_service(service_id, _db_file())
    return jsonify({"deleted": service_id})
