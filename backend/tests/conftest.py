import os
import tempfile
from collections.abc import Generator

os.environ.setdefault("NMM_DATA_DIR", tempfile.mkdtemp(prefix="nmm-test-"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

import nethermod_manager.models  # noqa: E402, F401 — register all tables
from nethermod_manager.database import get_session  # noqa: E402
from nethermod_manager.main import app  # noqa: E402
from nethermod_manager.models.analysis import Loader  # noqa: E402
from nethermod_manager.models.server import Server  # noqa: E402
from nethermod_manager.services.conflicts import catalog as catalog_mod  # noqa: E402


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(eng)
    return eng


@pytest.fixture
def session(engine, monkeypatch):
    with Session(engine) as sess:
        monkeypatch.setattr("nethermod_manager.database.engine", engine)
        yield sess


@pytest.fixture
def client(engine, monkeypatch):
    monkeypatch.setattr("nethermod_manager.database.engine", engine)

    def _override_session() -> Generator[Session, None, None]:
        with Session(engine) as sess:
            yield sess

    app.dependency_overrides[get_session] = _override_session
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _restore_rule_catalog(monkeypatch):
    """Undo any catalog swap a test makes."""
    monkeypatch.setattr(catalog_mod, "_active_catalog", catalog_mod.DEFAULT_RULE_CATALOG)


@pytest.fixture
def make_server(session, tmp_path):
    def _make(
        name: str = "Survival",
        game_version: str = "1.20.1",
        loader: Loader = Loader.forge,
        mods: list[str] | None = None,
    ) -> Server:
        install_path = tmp_path / name
        mods_dir = install_path / "mods"
        mods_dir.mkdir(parents=True)
        for file_name in mods or []:
            (mods_dir / file_name).write_bytes(b"jar")
        server = Server(
            name=name,
            install_path=str(install_path),
            game_version=game_version,
            loader=loader,
        )
        session.add(server)
        session.commit()
        session.refresh(server)
        return server

    return _make
