"""
codegen_core package
====================

Sinh mã OTP (HOTP/TOTP) cho danh sách service theo RFC 4226 & RFC 6238,
kèm timer đếm ngược và progress để hiển thị mã "live".

──────────────────────────────────────────────
Giải thuật cốt lõi
──────────────────────────────────────────────
- TOTP: counter = floor(now_ms / (period * 1000)), next counter tính tương tự
  với now_ms + period*1000 → mã "next" có sẵn trước khi step đổi.
- HOTP: counter = hotp_counter (mặc định 1), next = counter + 1.
- Phần HMAC + dynamic truncation do pyotp đảm nhiệm (xem otp.py).
- timer = period - (epoch_seconds_đã_hiệu_chỉnh % period), progress = timer / period.

──────────────────────────────────────────────
Ví dụ sử dụng nhanh
──────────────────────────────────────────────
>>> from codegen_core import Service, ServiceCodeGenerator, SystemTimeProvider
>>> generator = ServiceCodeGenerator(SystemTimeProvider())
>>> service = generator.generate(Service(secret="JBSWY3DPEHPK3PXP"))
>>> print(service.code.current, "còn", service.code.timer, "giây")
"""

from .code_generator import ServiceCodeGenerator, generate, resolve_config, to_digest
from .exceptions import CodeGeneratorError, MissingSecretError, ServiceNotFoundError
from .models import Algorithm, AuthType, Service, ServiceCode
from .otp import Digest, OtpData, generate_otp_code
from .time_provider import FixedTimeProvider, SystemTimeProvider, TimeProvider

__all__ = [
    "Algorithm",
    "AuthType",
    "CodeGeneratorError",
    "Digest",
    "FixedTimeProvider",
    "MissingSecretError",
    "OtpData",
    "Service",
    "ServiceCode",
    "ServiceCodeGenerator",
    "ServiceNotFoundError",
    "SystemTimeProvider",
    "TimeProvider",
    "generate",
    "generate_otp_code",
    "resolve_config",
    "to_digest",
]
