from typing import Any, Dict, List, Optional


def find_video(videos: List[Dict[str, Any]], video_id: str) -> Optional[Dict[str, Any]]:
    for v in videos:
        if v.get("id") == video_id:
            return v
    return None


def find_video_index(videos: List[Dict[str, Any]], video_id: str) -> int:
    for i, v in enumerate(videos):
        if v.get("id") == video_id:
            return i
    return -1


def find_comment(video: Dict[str, Any], comment_id: str) -> Optional[Dict[str, Any]]:
    for c in video.get("comments") or []:
        if c.get("id") == comment_id:
            return c
    return None
