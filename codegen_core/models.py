"""
models.py — Data model cho service (credential entry) và mã đã sinh.

- Service: cấu hình OTP của một tài khoản (immutable, caller sở hữu).
- ServiceCode: kết quả sinh mã (current / next / timer / progress),
  tạo mới mỗi lần gọi generate(), không có identity riêng.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class AuthType(Enum):
    TOTP = "TOTP"
    HOTP = "HOTP"


class Algorithm(Enum):
    SHA1 = "SHA1"
    SHA224 = "SHA224"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"


def _parse_enum(enum_cls, value):
    """Nhận cả enum lẫn string (không phân biệt hoa thường); None giữ nguyên."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls[str(value).strip().upper()]
    except KeyError:
        choices = ", ".join(m.name for m in enum_cls)
        raise ValueError(f"Invalid {enum_cls.__name__} '{value}' (expected one of: {choices})") from None


def _optional_int(value) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


def _positive_int(value, name: str) -> Optional[int]:
    """Như _optional_int nhưng giá trị phải > 0 (digits, period)."""
    number = _optional_int(value)
    if number is not None and number <= 0:
        raise ValueError(f"{name} must be a positive integer, got {number}")
    return number


@dataclass(frozen=True)
class ServiceCode:
    """
    Mã OTP đã tính cho một service.

    Fields:
        current: mã của counter / time-step hiện tại
        next: mã của counter / time-step kế tiếp
        timer: số giây còn lại của step TOTP hiện tại, trong [1, period]
        progress: timer / period, tỉ lệ thời gian CÒN LẠI (giảm dần từ ~1 về 0),
            không phải tỉ lệ đã trôi qua — vẽ vòng đếm ngược theo chiều này.

    Với HOTP, timer/progress vẫn được tính (từ period) nhưng không có ý nghĩa;
    caller nên bỏ qua hai field này.
    """

    current: str
    next: str
    timer: int
    progress: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current": self.current,
            "next": self.next,
            "timer": self.timer,
            "progress": self.progress,
        }


@dataclass(frozen=True)
class Service:
    """
    Cấu hình OTP của một service.

    Chỉ `secret` là bắt buộc; algorithm/digits/period/hotp_counter có thể None
    và sẽ được resolve về giá trị mặc định khi sinh mã (SHA1 / 6 / 30 / 1).
    """

    secret: Optional[str]
    auth_type: AuthType = AuthType.TOTP
    algorithm: Optional[Algorithm] = None
    digits: Optional[int] = None
    period: Optional[int] = None
    hotp_counter: Optional[int] = None
    id: Optional[int] = None
    name: str = ""
    issuer: Optional[str] = None
    code: Optional[ServiceCode] = field(default=None, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Service":
        """
        Tạo Service từ dict (JSON body, row database, tham số CLI).

        Raises:
            ValueError: nếu auth_type / algorithm / số nguyên không hợp lệ,
                hoặc digits / period <= 0
        """
        return cls(
            secret=data.get("secret"),
            auth_type=_parse_enum(AuthType, data.get("auth_type")) or AuthType.TOTP,
            algorithm=_parse_enum(Algorithm, data.get("algorithm")),
            digits=_positive_int(data.get("digits"), "digits"),
            period=_positive_int(data.get("period"), "period"),
            hotp_counter=_optional_int(data.get("hotp_counter")),
            id=_optional_int(data.get("id")),
            name=data.get("name") or "",
            issuer=data.get("issuer"),
        )

    def to_dict(self, include_secret: bool = False) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "issuer": self.issuer,
            "auth_type": self.auth_type.value,
            "algorithm": self.algorithm.value if self.algorithm else None,
            "digits": self.digits,
            "period": self.period,
            "hotp_counter": self.hotp_counter,
            "code": self.code.to_dict() if self.code else None,
        }
        if include_secret:
            data["secret"] = self.secret
        return data
