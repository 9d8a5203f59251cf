"""
code_generator.py — Sinh mã current/next + timer/progress cho một Service.

──────────────────────────────────────────────
Giải thuật
──────────────────────────────────────────────
1. resolve_config(): điền giá trị mặc định (period=30, digits=6, SHA1, hotp_counter=1).
2. Tính counter theo auth_type:
   - TOTP: current = now_ms // (period*1000)
           next    = (now_ms + period*1000) // (period*1000)
   - HOTP: current = hotp_counter, next = current + 1
3. Gọi primitive (otp.generate_otp_code) hai lần: counter current và counter next.
4. timer = period - ((now_ms // 1000 + delta_ms // 1000) % period)   -> [1, period]
   progress = timer / period                                         -> (0, 1]
   progress là phần thời gian CÒN LẠI, giảm dần trong một step.
5. Trả về bản sao của service với `code` mới; các field khác giữ nguyên.

Hàm generate() là pure function: không I/O, không state, gọi song song thoải mái.
Generator không bao giờ tăng/lưu hotp_counter — việc đó là của caller (xem codegen_database).
"""

import dataclasses
import logging
from typing import Iterable, List, NamedTuple, Optional

from . import config
from .exceptions import MissingSecretError
from .models import Algorithm, AuthType, Service, ServiceCode
from .otp import Digest, OtpData, generate_otp_code
from .time_provider import TimeProvider

logger = logging.getLogger(__name__)

_DIGESTS = {
    Algorithm.SHA1: Digest.SHA1,
    Algorithm.SHA224: Digest.SHA224,
    Algorithm.SHA256: Digest.SHA256,
    Algorithm.SHA384: Digest.SHA384,
    Algorithm.SHA512: Digest.SHA512,
}


class EffectiveConfig(NamedTuple):
    period: int
    digits: int
    digest: Digest
    hotp_counter: int


def to_digest(algorithm: Optional[Algorithm]) -> Digest:
    """Map Algorithm (cấu hình) -> Digest (primitive); None -> SHA1."""
    if algorithm is None:
        return Digest[config.DEFAULT_ALGORITHM]
    return _DIGESTS[algorithm]


def resolve_config(service: Service) -> EffectiveConfig:
    """Resolve các field optional của service về giá trị hiệu lực."""
    return EffectiveConfig(
        period=config.DEFAULT_PERIOD if service.period is None else service.period,
        digits=config.DEFAULT_DIGITS if service.digits is None else service.digits,
        digest=to_digest(service.algorithm),
        hotp_counter=config.DEFAULT_HOTP_COUNTER if service.hotp_counter is None else service.hotp_counter,
    )


def _counters(auth_type: AuthType, effective: EffectiveConfig, now_millis: int):
    if auth_type is AuthType.HOTP:
        current = effective.hotp_counter
        return current, current + 1
    period_millis = effective.period * 1000
    return now_millis // period_millis, (now_millis + period_millis) // period_millis


def calculate_timer(period: int, now_millis: int, clock_delta_millis: int) -> int:
    """Số giây còn lại của step hiện tại, tính trên thời gian đã hiệu chỉnh delta."""
    epoch_seconds = now_millis // 1000 + clock_delta_millis // 1000
    return period - epoch_seconds % period


def generate(service: Service, now_millis: int, clock_delta_millis: int = 0) -> Service:
    """
    Tính ServiceCode cho service tại thời điểm now_millis.

    Arguments:
        service: cấu hình OTP (chỉ secret là bắt buộc)
        now_millis: thời gian tin cậy, epoch milliseconds
        clock_delta_millis: độ lệch đồng hồ (ms) áp dụng khi tính timer

    Trả về:
        Service: bản sao của service, field `code` đã được thay mới

    Raises:
        MissingSecretError: service không có secret
        Lỗi từ pyotp / Base32 decode được raise nguyên vẹn, không bọc lại.
    """
    if not service.secret:
        raise MissingSecretError(service.id)

    effective = resolve_config(service)
    current_counter, next_counter = _counters(service.auth_type, effective, now_millis)

    otp_data = OtpData(
        counter=current_counter,
        secret=service.secret,
        digits=effective.digits,
        period=effective.period,
        algorithm=effective.digest,
    )
    current = generate_otp_code(otp_data)
    next_code = generate_otp_code(dataclasses.replace(otp_data, counter=next_counter))

    timer = calculate_timer(effective.period, now_millis, clock_delta_millis)
    logger.debug(
        "%s service=%s counter=%d next=%d timer=%ds",
        service.auth_type.name, service.id, current_counter, next_counter, timer,
    )

    return dataclasses.replace(
        service,
        code=ServiceCode(
            current=current,
            next=next_code,
            timer=timer,
            progress=timer / float(effective.period),
        ),
    )


class ServiceCodeGenerator:
    """
    Gắn generate() với một TimeProvider.

    Đọc real_current_time() và real_time_delta() đúng một lần mỗi service, nên
    current/next/timer của cùng một service luôn nhất quán với nhau.
    """

    def __init__(self, time_provider: TimeProvider):
        self.time_provider = time_provider

    def generate(self, service: Service) -> Service:
        return generate(
            service,
            now_millis=self.time_provider.real_current_time(),
            clock_delta_millis=self.time_provider.real_time_delta(),
        )

    def generate_all(self, services: Iterable[Service]) -> List[Service]:
        return [self.generate(service) for service in services]
