import json
import random

import pytest
from fastapi.testclient import TestClient

from videohub.api import create_app
from videohub.env import Settings
from videohub.seeds import SeedGenerator
from videohub.service import VideoService
from videohub.storage import VideoStore


@pytest.fixture
def settings(tmp_path):
    images = tmp_path / "images"
    videos = tmp_path / "videos"
    images.mkdir()
    videos.mkdir()
    return Settings(
        data_file=str(tmp_path / "data" / "videos.json"),
        images_dir=str(images),
        videos_dir=str(videos),
        seed_comment_count=3,
    )


@pytest.fixture
def seeds():
    return SeedGenerator(rng=random.Random(42))


@pytest.fixture
def store(settings):
    return VideoStore(settings.data_file)


@pytest.fixture
def service(store, seeds):
    return VideoService(store, seeds, seed_comment_count=3)


@pytest.fixture
def client(settings, seeds):
    app = create_app(settings, seeds=seeds)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


def read_store(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
