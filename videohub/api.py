import logging
import os
from typing import Optional

from fastapi import FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from .env import Settings, get_settings
from .errors import NotFoundError, ValidationError, VideoHubError
from .seeds import SeedGenerator
from .service import VideoService
from .storage import VideoStore
from .uploads import save_poster

logger = logging.getLogger(__name__)


class CommentIn(BaseModel):
    name: Optional[str] = None
    comment: Optional[str] = None


def _resolve_asset(directory: str, name: str) -> Optional[str]:
    root = os.path.realpath(directory)
    path = os.path.realpath(os.path.join(root, name))
    if not path.startswith(root + os.sep) or not os.path.isfile(path):
        return None
    return path


def create_app(settings: Optional[Settings] = None, seeds: Optional[SeedGenerator] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    service = VideoService(
        VideoStore(settings.data_file),
        seeds or SeedGenerator(),
        seed_comment_count=settings.seed_comment_count,
    )

    app = FastAPI(title="VideoHub API", version="0.1")
    app.state.settings = settings
    app.state.service = service

    wildcard = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=not wildcard,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    logger.info(
        "Data file %s, images %s, videos %s, CORS origins %s",
        settings.data_file, settings.images_dir, settings.videos_dir, ", ".join(settings.cors_origins),
    )

    # ---------- error translation ----------

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        logger.info(
            "%s on %s %s (video=%s comment=%s)",
            exc, request.method, request.url.path, exc.video_id, getattr(exc, "comment_id", None),
        )
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(ValidationError)
    async def invalid(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def unmatched(request: Request, exc: StarletteHTTPException):
        # unknown paths and unsupported methods both fall through to the catch-all
        if exc.status_code in (404, 405):
            return PlainTextResponse("Sorry can't find that!", status_code=404)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "details": str(exc)},
        )

    # ---------- routes ----------

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/videos")
    def list_videos():
        return service.list_videos()

    @app.get("/videos/{video_id}")
    def get_video(video_id: str):
        return service.get_video(video_id)

    @app.post("/videos", status_code=201)
    def create_video(
        poster_image: Optional[UploadFile] = File(default=None, alias="posterImage"),
        title: str = Form(default=""),
        description: str = Form(default=""),
    ):
        if poster_image is None:
            raise ValidationError("No file uploaded")
        try:
            image_path = save_poster(settings.images_dir, poster_image.filename, poster_image.file)
            video = service.create_video(title, description, image_path)
        except VideoHubError:
            raise
        except Exception:
            logger.exception("Upload processing failed for %s", poster_image.filename)
            return JSONResponse(status_code=500, content={"error": "Failed to process upload"})
        finally:
            poster_image.file.close()
        return {
            "message": "Video uploaded successfully",
            "videoId": video["id"],
            "imagePath": video["image"],
        }

    @app.post("/videos/{video_id}/comments", status_code=201)
    def add_comment(video_id: str, payload: Optional[CommentIn] = None):
        payload = payload or CommentIn()
        return service.add_comment(video_id, payload.name, payload.comment)

    @app.put("/videos/{video_id}/likes")
    def like_video(video_id: str):
        return service.increment_video_likes(video_id)

    @app.put("/videos/{video_id}/views")
    def view_video(video_id: str):
        return service.increment_video_views(video_id)

    @app.put("/videos/{video_id}/comments/{comment_id}/likes")
    def like_comment(video_id: str, comment_id: str):
        return {"likes": service.increment_comment_likes(video_id, comment_id)}

    @app.delete("/videos/{video_id}/comments/{comment_id}", status_code=204)
    def delete_comment(video_id: str, comment_id: str):
        service.delete_comment(video_id, comment_id)
        return Response(status_code=204)

    # ---------- static assets (registered last, catches what the routes above don't) ----------

    @app.get("/{asset_name}")
    def asset(asset_name: str):
        for directory in (settings.images_dir, settings.videos_dir):
            path = _resolve_asset(directory, asset_name)
            if path:
                return FileResponse(path)
        raise HTTPException(status_code=404)

    return app
