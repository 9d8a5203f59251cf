"""
otp.py — Primitive sinh mã OTP (HMAC + dynamic truncation) qua thư viện pyotp.

Module này KHÔNG tự cài đặt RFC 4226 truncation: pyotp.HOTP làm việc đó.
Input là một OtpData (counter, secret, digits, period, algorithm), output là chuỗi
số có đúng `digits` chữ số (zero-padded).

Ví dụ (RFC 4226, secret "12345678901234567890" dạng Base32):
    >>> generate_otp_code(OtpData(counter=1, secret="GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ",
    ...                           digits=6, period=30, algorithm=Digest.SHA1))
    '287082'
"""

import hashlib
import logging
from dataclasses import dataclass
from enum import Enum

import pyotp

logger = logging.getLogger(__name__)


class Digest(Enum):
    """Hàm băm dùng trong HMAC; value là constructor của hashlib."""

    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def hash_function(self):
        return getattr(hashlib, self.value)


@dataclass(frozen=True)
class OtpData:
    counter: int
    secret: str
    digits: int
    period: int
    algorithm: Digest = Digest.SHA1


def generate_otp_code(otp_data: OtpData) -> str:
    """
    Sinh mã HOTP cho otp_data.counter.

    Với TOTP, caller tự tính counter = floor(time / period) rồi gọi hàm này;
    `period` chỉ được mang theo trong record, không dùng ở đây.

    Raises:
        binascii.Error: secret không phải Base32 hợp lệ
        ValueError: digits > 10 hoặc counter âm (do pyotp raise)
    """
    hotp = pyotp.HOTP(
        otp_data.secret,
        digits=otp_data.digits,
        digest=otp_data.algorithm.hash_function,
    )
    code = hotp.at(otp_data.counter)
    logger.debug("HOTP %s counter=%d digits=%d", otp_data.algorithm.name, otp_data.counter, otp_data.digits)
    return code
