"""Mini README: HTTP client for the remote virtual tour service.

Structure:
    * TourApiClient - thin wrapper around ``requests.Session``.

Every failure (connection problems, timeouts, non-2xx replies, unparsable
JSON) is raised as ``UploadError`` so callers can recover per item. Reads are
retried by the mounted adapter; writes are never retried because a repeated
POST would create duplicate remote entities.
"""

from __future__ import annotations

import mimetypes
from contextlib import ExitStack
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..errors import UploadError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

API_PREFIX = "/v2"
_CHUNK_SIZE = 64 * 1024


def _make_session(api_key: str) -> requests.Session:
    session = requests.Session()
    adapter = HTTPAdapter(
        max_retries=Retry(
            total=3,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=frozenset({"GET", "HEAD"}),
        )
    )
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update(
        {
            "Accept": "application/json",
            "Authorization": f"Bearer {api_key}",
            "User-Agent": "toursync/0.1",
        }
    )
    return session


class TourApiClient:
    """Create, link and fetch tour entities on the remote service."""

    def __init__(
        self,
        domain: str,
        api_key: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 60.0,
        media_timeout: float = 300.0,
    ) -> None:
        if not api_key:
            raise ValueError("api_key is required")
        base_url = domain.rstrip("/")
        if not base_url.startswith(("http://", "https://")):
            base_url = f"https://{base_url}"
        self.base_url = base_url
        self.timeout = timeout
        self.media_timeout = media_timeout
        self.session = session or _make_session(api_key)
        LOGGER.debug("API client ready for %s", self.base_url)

    def _url(self, path: str) -> str:
        return f"{self.base_url}{API_PREFIX}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        url = self._url(path)
        kwargs.setdefault("timeout", self.timeout)
        LOGGER.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as error:
            raise UploadError(f"{method} {url} failed: {error}") from error

        if not 200 <= response.status_code < 300:
            raise UploadError(
                f"{method} {url} returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as error:
            raise UploadError(f"{method} {url} returned invalid JSON") from error

    def _multipart(
        self,
        path: str,
        fields: Mapping[str, str],
        files: Sequence[Tuple[str, Path]],
        *,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        with ExitStack() as stack:
            parts: List[Tuple[str, Tuple[str, Any, str]]] = []
            for field_name, file_path in files:
                try:
                    handle = stack.enter_context(open(file_path, "rb"))
                except OSError as error:
                    raise UploadError(f"Cannot read {file_path}: {error}") from error
                content_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
                parts.append((field_name, (file_path.name, handle, content_type)))
            return self._request(
                "POST",
                path,
                data=dict(fields),
                files=parts,
                timeout=timeout or self.timeout,
            )

    def create(self, entity: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """POST a JSON document creating one entity."""

        return self._request("POST", entity, json=dict(payload))

    def update(self, entity: str, entity_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """PATCH selected fields of an existing entity."""

        return self._request("PATCH", f"{entity}/{entity_id}", json=dict(payload))

    def upload_file(self, file_path: Path, fields: Mapping[str, str]) -> Dict[str, Any]:
        """Store a raw file with metadata fields in the remote file store."""

        return self._multipart("file", fields, [("file", Path(file_path))])

    def create_scene(self, fields: Mapping[str, str], media: Sequence[Path]) -> Dict[str, Any]:
        """Create a scene whose media parts keep the given order."""

        return self._multipart(
            "scene/",
            fields,
            [("media", Path(path)) for path in media],
            timeout=self.media_timeout,
        )

    def create_floor_plan(self, name: str, media: Path) -> Dict[str, Any]:
        return self._multipart("floorPlan/", {"floorPlanName": name}, [("media", Path(media))])

    def get_tour_view(self, tour_id: str) -> Dict[str, Any]:
        """Fetch the fully populated tour document used by the downloader."""

        return self._request("GET", f"virtualTour/view/{tour_id}")

    def download(self, url: str, destination: Path) -> Path:
        """Stream an absolute media URL into ``destination``."""

        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        try:
            with self.session.get(url, stream=True, timeout=self.media_timeout) as response:
                if response.status_code != 200:
                    raise UploadError(
                        f"HTTP {response.status_code} for {url}",
                        status_code=response.status_code,
                    )
                with destination.open("wb") as handle:
                    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                        if chunk:
                            handle.write(chunk)
        except (requests.RequestException, OSError) as error:
            destination.unlink(missing_ok=True)
            raise UploadError(f"Download of {url} failed: {error}") from error
        except UploadError:
            destination.unlink(missing_ok=True)
            raise
        return destination
