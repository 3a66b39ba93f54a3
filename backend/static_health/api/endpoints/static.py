"""Static file endpoint, matched after every other route."""

from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import FileResponse, RedirectResponse, Response

from ...core.logging import get_logger
from ...services.static_files import StaticFileResolver

router = APIRouter()
logger = get_logger("static")


def _get_resolver(request: Request) -> StaticFileResolver:
    return request.app.state.static_files


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


@router.api_route("/{requested:path}", methods=["GET", "HEAD"], include_in_schema=False)
def serve_static(
    requested: str,
    request: Request,
    resolver: StaticFileResolver = Depends(_get_resolver),
) -> Response:
    asset = resolver.locate(requested)
    if asset is None:
        raise _not_found()

    if requested and not requested.endswith("/") and resolver.is_directory(requested):
        location = quote(request.url.path) + "/"
        if request.url.query:
            location = f"{location}?{request.url.query}"
        return RedirectResponse(location, status_code=status.HTTP_301_MOVED_PERMANENTLY)

    try:
        stat_result = resolver.open_stat(asset)
    except (FileNotFoundError, IsADirectoryError):
        raise _not_found()
    except OSError:
        logger.exception("Failed to read static file %s", asset.path)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        )

    return FileResponse(asset.path, media_type=asset.media_type, stat_result=stat_result)
