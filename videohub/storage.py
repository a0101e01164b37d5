import json
import logging
import os
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


class VideoStore:
    """The whole video collection, kept as one pretty-printed JSON array on disk.

    Both directions fail open: a missing or corrupt file reads as an empty
    collection, and a failed write is logged and dropped. A caller can
    therefore get a success response for a change that never reached disk.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[Dict[str, Any]]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Could not read video store %s: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.error("Video store %s does not hold a JSON array", self.path)
            return []
        return data

    def save(self, videos: List[Dict[str, Any]]) -> None:
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(videos, f, ensure_ascii=False, indent=2)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Could not write video store %s: %s", self.path, e)
