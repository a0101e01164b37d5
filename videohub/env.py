import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv


def load_env(path: Optional[str] = ".env") -> None:
    # real environment wins over the .env file
    load_dotenv(path, override=False)


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: tuple = ("*",)
    data_file: str = os.path.join("data", "videos.json")
    images_dir: str = os.path.join("public", "images")
    videos_dir: str = os.path.join("public", "videos")
    seed_comment_count: int = 3
    log_level: str = "INFO"


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


def get_settings() -> Settings:
    load_env(".env")
    defaults = Settings()
    origins = _split_origins(os.getenv("CORS_ORIGIN", "")) or list(defaults.cors_origins)
    return Settings(
        host=os.getenv("HOST", defaults.host),
        port=int(os.getenv("PORT") or defaults.port),
        cors_origins=tuple(origins),
        data_file=os.getenv("DATA_FILE", defaults.data_file),
        images_dir=os.getenv("IMAGES_DIR", defaults.images_dir),
        videos_dir=os.getenv("VIDEOS_DIR", defaults.videos_dir),
        seed_comment_count=int(os.getenv("SEED_COMMENT_COUNT") or defaults.seed_comment_count),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
    )
