import pytest

from codegen_core.exceptions import MissingSecretError, ServiceNotFoundError
from codegen_core.models import Algorithm, AuthType, Service
from codegen_database import db_manager


def test_add_and_get_service(db_file):
    added = db_manager.add_service(
        Service(secret="JBSWY3DPEHPK3PXP", name="alice", issuer="GitHub", algorithm=Algorithm.SHA256, digits=8),
        db_file,
    )
    assert added.id is not None

    loaded = db_manager.get_service(added.id, db_file)
    assert loaded == added
    assert loaded.secret == "JBSWY3DPEHPK3PXP"
    assert loaded.algorithm is Algorithm.SHA256
    assert loaded.period is None


def test_add_service_requires_secret(db_file):
    with pytest.raises(MissingSecretError):
        db_manager.add_service(Service(secret=""), db_file)


def test_list_services_in_insert_order(db_file):
    for name in ("a", "b", "c"):
        db_manager.add_service(Service(secret="JBSWY3DPEHPK3PXP", name=name), db_file)
    assert [s.name for s in db_manager.list_services(db_file)] == ["a", "b", "c"]


def test_get_missing_service(db_file):
    with pytest.raises(ServiceNotFoundError):
        db_manager.get_service(42, db_file)


def test_increment_hotp_counter_from_default(db_file):
    service = db_manager.add_service(Service(secret="JBSWY3DPEHPK3PXP", auth_type=AuthType.HOTP), db_file)
    assert db_manager.increment_hotp_counter(service.id, db_file).hotp_counter == 2
    assert db_manager.increment_hotp_counter(service.id, db_file).hotp_counter == 3


def test_increment_hotp_counter_from_explicit_value(db_file):
    service = db_manager.add_service(
        Service(secret="JBSWY3DPEHPK3PXP", auth_type=AuthType.HOTP, hotp_counter=10), db_file,
    )
    assert db_manager.increment_hotp_counter(service.id, db_file).hotp_counter == 11


def test_increment_missing_service(db_file):
    with pytest.raises(ServiceNotFoundError):
        db_manager.increment_hotp_counter(5, db_file)


def test_delete_service(db_file):
    service = db_manager.add_service(Service(secret="JBSWY3DPEHPK3PXP"), db_file)
    db_manager.delete_service(service.id, db_file)
    assert db_manager.list_services(db_file) == []
    with pytest.raises(ServiceNotFoundError):
        db_manager.delete_service(service.id, db_file)


@pytest.mark.parametrize("service", [
    Service(secret="###"),
    Service(secret="JBSWY3DPEHPK3PXP", digits=11),
])
def test_add_service_rejects_service_that_cannot_generate(db_file, service):
    db_manager.add_service(Service(secret="JBSWY3DPEHPK3PXP", name="good"), db_file)
    with pytest.raises(ValueError):
        db_manager.add_service(service, db_file)
    assert [s.name for s in db_manager.list_services(db_file)] == ["good"]
