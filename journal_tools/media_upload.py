"""Upload a local image or video to Cloudinary.

Usage:
  python -m journal_tools.media_upload --path ~/Pictures/desk.jpg
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import requests

from config import JournalConfig, load_config, load_workspace_env, resolve_workspace
from errors import FileAccessError, UploadResponseError, UploadTransportError
from models import UploadResult
from prompt import clean_media_path


UPLOAD_URL = "https://api.cloudinary.com/v1_1/{cloud_id}/{media_type}/upload"


def media_type_for(media_path: str) -> str:
    # Only .mp4 goes to the video endpoint; .mov, .webm, .MP4 are sent as images.
    if str(media_path).endswith(".mp4"):
        return "video"
    return "image"


def upload_endpoint(cloud_id: str, media_type: str) -> str:
    return UPLOAD_URL.format(cloud_id=cloud_id, media_type=media_type)


def _dimension(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def parse_upload_response(body: str) -> UploadResult:
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise UploadResponseError(f"Upload response is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise UploadResponseError("Upload response is not a JSON object")

    secure_url = data.get("secure_url")
    if not isinstance(secure_url, str):
        raise UploadResponseError("Upload response has no secure_url")

    return UploadResult(
        secure_url=secure_url,
        width=_dimension(data.get("width")),
        height=_dimension(data.get("height")),
    )


def _error_detail(body: str) -> str:
    try:
        data = json.loads(body)
    except ValueError:
        return body.strip()[:200]
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        message = data["error"].get("message")
        if isinstance(message, str):
            return message
    return body.strip()[:200]


def upload_media(media_path: str, config: JournalConfig) -> UploadResult:
    """POST the file once as multipart form data and parse the reply.

    The file is opened before anything touches the network, so a bad path
    never produces a request.
    """
    file_path = Path(media_path)
    if not file_path.exists():
        raise FileAccessError(f"Media file not found: {media_path}")
    if not file_path.is_file():
        raise FileAccessError(f"Media path is not a file: {media_path}")

    try:
        handle = file_path.open("rb")
    except OSError as exc:
        raise FileAccessError(f"Cannot read media file {media_path}: {exc}") from exc

    url = upload_endpoint(config.cloudinary_id, media_type_for(media_path))
    form = {
        "api_key": config.cloudinary_api_key,
        "upload_preset": config.cloudinary_preset,
    }

    with handle:
        try:
            response = requests.post(url, data=form, files={"file": (file_path.name, handle)})
        except requests.RequestException as exc:
            raise UploadTransportError(f"Cloudinary request failed: {exc}") from exc

    if not 200 <= response.status_code < 300:
        detail = _error_detail(response.text)
        raise UploadTransportError(f"Cloudinary API error: {response.status_code} {detail}".rstrip())

    return parse_upload_response(response.text)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Upload media to Cloudinary")
    parser.add_argument("--path", required=True)
    parser.add_argument("--workspace", default=None)
    args = parser.parse_args(argv)

    workspace = resolve_workspace(args.workspace)
    load_workspace_env(workspace)
    config = load_config()

    result = upload_media(clean_media_path(args.path), config)
    data = {"secure_url": result.secure_url, "width": result.width, "height": result.height}
    print(json.dumps({"success": True, "data": data}, ensure_ascii=False))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:
        print(json.dumps({"success": False, "error": str(exc)}))
        sys.exit(1)
