"""
time_provider.py — Nguồn thời gian "tin cậy" cho code generator.

Generator không tự đọc đồng hồ: caller (CLI, backend) truyền vào một TimeProvider.
- real_current_time(): epoch milliseconds đã hiệu chỉnh (dùng để tính counter TOTP)
- real_time_delta(): độ lệch còn lại (ms) cộng thêm khi tính timer đếm ngược

Việc đồng bộ thời gian qua mạng nằm ngoài phạm vi; offset/delta được cấu hình sẵn.
"""

import time

from . import config


class TimeProvider:
    """Interface: subclass phải override cả hai method."""

    def real_current_time(self) -> int:
        raise NotImplementedError

    def real_time_delta(self) -> int:
        raise NotImplementedError


class SystemTimeProvider(TimeProvider):
    """
    Đồng hồ hệ thống (time.time()) + offset cố định.

    Arguments:
        offset_millis: độ lệch giữa đồng hồ local và giờ chuẩn, cộng vào real_current_time()
        residual_delta_millis: phần hiệu chỉnh trả về bởi real_time_delta()
    """

    def __init__(self, offset_millis: int = None, residual_delta_millis: int = None):
        if offset_millis is None:
            offset_millis = config.TIME_OFFSET_MS
        if residual_delta_millis is None:
            residual_delta_millis = config.TIME_DELTA_MS
        self.offset_millis = offset_millis
        self.residual_delta_millis = residual_delta_millis

    def real_current_time(self) -> int:
        return int(time.time() * 1000) + self.offset_millis

    def real_time_delta(self) -> int:
        return self.residual_delta_millis


class FixedTimeProvider(TimeProvider):
    """Đồng hồ đứng yên — dùng cho test, `codegen code --at` và API có now_millis."""

    def __init__(self, now_millis: int, delta_millis: int = 0):
        self.now_millis = now_millis
        self.delta_millis = delta_millis

    def real_current_time(self) -> int:
        return self.now_millis

    def real_time_delta(self) -> int:
        return self.delta_millis

    def advance(self, millis: int) -> None:
        self.now_millis += millis
