import sys
import random
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from catalog.config import AppConfig
from catalog.repository.races_repo import RacesRepo
from catalog.repository.sports_repo import SportsRepo


@pytest.fixture()
def app_config(tmp_path):
    return AppConfig(
        racing_db_path=str(tmp_path / "racing.db"),
        sports_db_path=str(tmp_path / "sports.db"),
        log_db_path=str(tmp_path / "catalog_log.db"),
        seed_count=100,
    )


@pytest.fixture()
def races_repo(app_config):
    repo = RacesRepo(app_config.racing_db_path, app_config.seed_count, rng=random.Random(7))
    repo.init()
    return repo


@pytest.fixture()
def sports_repo(app_config):
    repo = SportsRepo(app_config.sports_db_path, app_config.seed_count, rng=random.Random(7))
    repo.init()
    return repo


@pytest.fixture()
def empty_sports_repo(tmp_path):
    # table created, no rows: tests insert exactly what they need
    repo = SportsRepo(str(tmp_path / "sports_empty.db"), seed_count=0)
    repo.init()
    return repo


@pytest.fixture()
def client(app_config):
    from catalog.api import create_app
    from fastapi.testclient import TestClient

    app = create_app(app_config)
    # context manager runs the startup hook (schema + seeding)
    with TestClient(app) as c:
        yield c
