import pytest

from codegen_backend import create_app
from codegen_core.time_provider import FixedTimeProvider
from codegen_database import setup_database


@pytest.fixture
def db_file(tmp_path):
    path = str(tmp_path / "codegen.db")
    setup_database(path)
    return path


@pytest.fixture
def time_provider():
    return FixedTimeProvider(59_000)


@pytest.fixture
def app(db_file, time_provider):
    app = create_app({
        "TESTING": True,
        "DATABASE_FILE": db_file,
        "TIME_PROVIDER": time_provider,
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()
