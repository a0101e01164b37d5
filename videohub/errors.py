class VideoHubError(Exception):
    pass


class NotFoundError(VideoHubError):
    video_id: str = ""


class VideoNotFound(NotFoundError):
    def __init__(self, video_id: str):
        super().__init__("Video not found")
        self.video_id = video_id


class CommentNotFound(NotFoundError):
    def __init__(self, video_id: str, comment_id: str):
        super().__init__("Comment not found")
        self.video_id = video_id
        self.comment_id = comment_id


class ValidationError(VideoHubError):
    pass
