import pytest

from codegen_core.models import Algorithm, AuthType, Service, ServiceCode


def test_from_dict_defaults():
    service = Service.from_dict({"secret": "JBSWY3DPEHPK3PXP"})
    assert service.auth_type is AuthType.TOTP
    assert service.algorithm is None
    assert service.digits is None
    assert service.period is None
    assert service.hotp_counter is None
    assert service.name == ""


def test_from_dict_parses_enums_case_insensitive():
    service = Service.from_dict({
        "secret": "JBSWY3DPEHPK3PXP",
        "auth_type": "hotp",
        "algorithm": "sha256",
        "digits": "8",
        "hotp_counter": 4,
    })
    assert service.auth_type is AuthType.HOTP
    assert service.algorithm is Algorithm.SHA256
    assert service.digits == 8
    assert service.hotp_counter == 4


@pytest.mark.parametrize("data", [
    {"secret": "JBSWY3DPEHPK3PXP", "auth_type": "steam"},
    {"secret": "JBSWY3DPEHPK3PXP", "algorithm": "md5"},
    {"secret": "JBSWY3DPEHPK3PXP", "digits": "six"},
])
def test_from_dict_rejects_invalid_values(data):
    with pytest.raises(ValueError):
        Service.from_dict(data)


def test_to_dict_hides_secret_by_default():
    service = Service(secret="JBSWY3DPEHPK3PXP", id=3, name="bob", algorithm=Algorithm.SHA1)
    data = service.to_dict()
    assert "secret" not in data
    assert data["algorithm"] == "SHA1"
    assert data["auth_type"] == "TOTP"
    assert data["code"] is None
    assert service.to_dict(include_secret=True)["secret"] == "JBSWY3DPEHPK3PXP"


def test_to_dict_round_trips_through_from_dict():
    service = Service(secret="JBSWY3DPEHPK3PXP", auth_type=AuthType.HOTP, hotp_counter=9, issuer="ACME")
    assert Service.from_dict(service.to_dict(include_secret=True)) == service


def test_service_code_to_dict():
    code = ServiceCode(current="123456", next="654321", timer=12, progress=0.4)
    assert code.to_dict() == {"current": "123456", "next": "654321", "timer": 12, "progress": 0.4}


@pytest.mark.parametrize("field_name,value", [
    ("period", 0),
    ("period", -30),
    ("digits", 0),
    ("digits", "-6"),
])
def test_from_dict_rejects_non_positive_digits_and_period(field_name, value):
    with pytest.raises(ValueError, match=field_name):
        Service.from_dict({"secret": "JBSWY3DPEHPK3PXP", field_name: value})
