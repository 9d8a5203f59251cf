"""
exceptions.py — Exception của code generator và database service.

Lỗi từ pyotp (Base32 sai, digits > 10, counter âm) KHÔNG được bọc lại ở đây;
chúng được raise nguyên vẹn tới caller.
"""


class CodeGeneratorError(Exception):
    """Base class cho lỗi do project này raise (không phải pyotp)."""


class MissingSecretError(CodeGeneratorError, ValueError):
    def __init__(self, service_id=None):
        self.service_id = service_id
        if service_id is None:
            msg = "Service secret is required"
        else:
            msg = f"Service {service_id} has no secret"
        super().__init__(msg)


class ServiceNotFoundError(CodeGeneratorError, LookupError):
    def __init__(self, service_id):
        self.service_id = service_id
        super().__init__(f"Service {service_id} not found")
