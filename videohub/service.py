import logging
import threading
from typing import Any, Dict, List, Optional

from . import counters
from .errors import CommentNotFound, ValidationError, VideoNotFound
from .lookup import find_comment, find_video, find_video_index
from .seeds import SeedGenerator, new_id, now_ms
from .storage import VideoStore

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "/Upload-video-preview.jpg"
SAMPLE_VIDEO = "/sample-video.mp4"
PLACEHOLDER_DURATION = "4:01"


class VideoService:
    """Every operation is one load -> mutate -> save pass over the store.

    The lock makes those passes run one at a time inside this process.
    """

    def __init__(self, store: VideoStore, seeds: SeedGenerator, seed_comment_count: int = 3):
        self.store = store
        self.seeds = seeds
        self.seed_comment_count = seed_comment_count
        self._lock = threading.Lock()

    def _require_video(self, videos: List[Dict[str, Any]], video_id: str) -> Dict[str, Any]:
        video = find_video(videos, video_id)
        if video is None:
            raise VideoNotFound(video_id)
        return video

    def _require_comment(self, video: Dict[str, Any], comment_id: str) -> Dict[str, Any]:
        comment = find_comment(video, comment_id)
        if comment is None:
            raise CommentNotFound(video["id"], comment_id)
        return comment

    def list_videos(self) -> List[Dict[str, Any]]:
        with self._lock:
            videos = self.store.load()
        return [
            {
                "id": v.get("id"),
                "title": v.get("title"),
                "channel": v.get("channel"),
                "image": v.get("image"),
            }
            for v in videos
        ]

    def get_video(self, video_id: str) -> Dict[str, Any]:
        with self._lock:
            videos = self.store.load()
        return self._require_video(videos, video_id)

    def create_video(self, title: str, description: str, image_path: Optional[str] = None) -> Dict[str, Any]:
        with self._lock:
            now = now_ms()
            video = {
                "id": new_id(),
                "title": title,
                "channel": self.seeds.channel(),
                "image": image_path or PLACEHOLDER_IMAGE,
                "description": description,
                "views": self.seeds.views(),
                "likes": self.seeds.likes(),
                "duration": PLACEHOLDER_DURATION,
                "video": SAMPLE_VIDEO,
                "timestamp": now,
                "comments": self.seeds.seed_comments(self.seed_comment_count, now=now),
            }
            videos = self.store.load()
            videos.append(video)
            self.store.save(videos)
        logger.info("Created video %s (%r) on channel %s", video["id"], title, video["channel"])
        return video

    def add_comment(self, video_id: str, name: Optional[str], comment: Optional[str]) -> Dict[str, Any]:
        if not name or not comment:
            raise ValidationError("Name and comment are required")
        with self._lock:
            videos = self.store.load()
            video = self._require_video(videos, video_id)
            new_comment = {
                "id": new_id(),
                "name": name,
                "comment": comment,
                "likes": 0,
                "timestamp": now_ms(),
            }
            video.setdefault("comments", []).append(new_comment)
            self.store.save(videos)
        logger.info("Added comment %s to video %s", new_comment["id"], video_id)
        return new_comment

    def _increment_counter(self, video_id: str, field: str) -> Dict[str, Any]:
        with self._lock:
            videos = self.store.load()
            idx = find_video_index(videos, video_id)
            if idx < 0:
                raise VideoNotFound(video_id)
            video = videos[idx]
            video[field] = counters.increment(video.get(field) or "0")
            self.store.save(videos)
        return video

    def increment_video_likes(self, video_id: str) -> Dict[str, Any]:
        return self._increment_counter(video_id, "likes")

    def increment_video_views(self, video_id: str) -> Dict[str, Any]:
        return self._increment_counter(video_id, "views")

    def increment_comment_likes(self, video_id: str, comment_id: str) -> int:
        with self._lock:
            videos = self.store.load()
            video = self._require_video(videos, video_id)
            comment = self._require_comment(video, comment_id)
            comment["likes"] = int(comment.get("likes") or 0) + 1
            self.store.save(videos)
        return comment["likes"]

    def delete_comment(self, video_id: str, comment_id: str) -> None:
        with self._lock:
            videos = self.store.load()
            video = self._require_video(videos, video_id)
            comment = self._require_comment(video, comment_id)
            video["comments"] = [c for c in video["comments"] if c is not comment]
            self.store.save(videos)
        logger.info("Deleted comment %s from video %s", comment_id, video_id)
