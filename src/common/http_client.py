"""Shared HTTP helpers used by every distribution resolver.

Encapsulates request/timeout handling and the bounded retry policy so the
resolvers only deal with catalog payloads. Transport failures are raised as
``TransportError``; nothing here exits the process.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
import time
import uuid
from typing import Any, Dict, Optional, Tuple

import requests

from constants import Constants
from common.errors import TransportError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def _default_headers(headers: Optional[Dict[str, str]]) -> Dict[str, str]:
    merged = {"User-Agent": Constants.USER_AGENT}
    if headers:
        merged.update({k: v for k, v in headers.items() if v is not None})
    return merged


def _retry_delay(attempt: int) -> float:
    return Constants.HTTP_RETRY_BASE_DELAY_SEC * (2 ** attempt)


def _request(method: str, url: str, *, headers: Optional[Dict[str, str]] = None, **kwargs: Any) -> requests.Response:
    """Send a request, retrying connection errors, timeouts and 5xx responses."""
    safe_target = safe_url(url)
    timeout = kwargs.pop("timeout", Constants.REQUEST_TIMEOUT)
    last_exception: Optional[str] = None
    response: Optional[requests.Response] = None

    for attempt in range(Constants.HTTP_RETRY_MAX):
        if attempt:
            time.sleep(_retry_delay(attempt - 1))
        with Timer() as t:
            try:
                if is_debug_enabled(logger):
                    logger.debug(
                        "HTTP request",
                        extra=extra_context(
                            event="http_request",
                            component="http_client",
                            action=method,
                            target=safe_target,
                            attempt=attempt + 1
                        )
                    )
                response = requests.request(
                    method,
                    url,
                    headers=_default_headers(headers),
                    timeout=timeout,
                    **kwargs
                )
            except requests.Timeout:
                last_exception = "timeout"
                logger.debug("%s %s timed out (attempt %d)", method, safe_target, attempt + 1)
                continue
            except requests.RequestException as exc:  # includes ConnectionError
                last_exception = str(exc)
                logger.debug("%s %s failed (attempt %d): %s", method, safe_target, attempt + 1, exc)
                continue

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action=method,
                    status_code=response.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target
                )
            )
        if response.status_code >= 500:
            last_exception = f"HTTP {response.status_code}"
            continue
        return response

    if response is not None and response.status_code >= 500:
        return response
    raise TransportError(
        f"Request to {safe_target} failed after {Constants.HTTP_RETRY_MAX} attempts: {last_exception}"
    )


def get_json(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any
) -> Tuple[int, Dict[str, str], Optional[Any]]:
    """Perform GET request and parse JSON response.

    Args:
        url: Target URL
        headers: Optional request headers
        **kwargs: Additional requests parameters

    Returns:
        Tuple of (status_code, headers_dict, parsed_json_or_none). A 404
        yields ``None`` as payload.

    Raises:
        TransportError: on any other non-2xx status, on exhausted retries and
            on a body that is not valid JSON.
    """
    merged = {"Accept": "application/json"}
    merged.update(headers or {})
    response = _request("GET", url, headers=merged, **kwargs)
    response_headers = dict(response.headers)

    if response.status_code == 404:
        return response.status_code, response_headers, None
    if response.status_code >= 400:
        raise TransportError(
            f"Request to {safe_url(url)} failed with status code: {response.status_code}",
            status_code=response.status_code,
        )
    if not response.text:
        return response.status_code, response_headers, None

    try:
        return response.status_code, response_headers, json.loads(response.text)
    except json.JSONDecodeError as exc:
        raise TransportError(f"Invalid JSON received from {safe_url(url)}: {exc}", response.status_code) from exc


def head(url: str, *, headers: Optional[Dict[str, str]] = None) -> int:
    """Return the status code of a HEAD request, following redirects."""
    response = _request("HEAD", url, headers=headers, allow_redirects=True)
    return response.status_code


def github_headers(accept: str = Constants.GITHUB_RAW_ACCEPT) -> Dict[str, str]:
    """Headers for api.github.com, authenticated when a token is available."""
    headers = {"Accept": accept}
    token = os.environ.get(Constants.ENV_GITHUB_TOKEN)
    if token and token.strip():
        headers["Authorization"] = f"token {token.strip()}"
    return headers


def temp_directory() -> str:
    """Runner scratch space, falling back to the system temp dir."""
    return os.environ.get(Constants.ENV_TEMP) or tempfile.gettempdir()


def download_tool(url: str, dest_dir: Optional[str] = None) -> str:
    """Stream ``url`` to a uniquely named file and return its path.

    The file keeps the archive suffix of the URL so extraction can infer the
    format later.
    """
    dest_dir = dest_dir or temp_directory()
    os.makedirs(dest_dir, exist_ok=True)
    basename = url.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]
    dest = os.path.join(dest_dir, f"{uuid.uuid4()}-{basename}")

    response = _request("GET", url, stream=True, timeout=Constants.DOWNLOAD_TIMEOUT, allow_redirects=True)
    try:
        if response.status_code >= 400:
            raise TransportError(
                f"Unexpected HTTP response: {response.status_code} while downloading {safe_url(url)}",
                status_code=response.status_code,
            )
        with Timer() as t:
            with open(dest, "wb") as fh:
                for chunk in response.iter_content(chunk_size=Constants.DOWNLOAD_CHUNK_SIZE):
                    if chunk:
                        fh.write(chunk)
    except (OSError, requests.RequestException) as exc:
        if os.path.exists(dest):
            os.remove(dest)
        raise TransportError(f"Failed to download {safe_url(url)}: {exc}") from exc
    finally:
        response.close()
    logger.debug("Downloaded %s to %s in %d ms", safe_url(url), dest, t.duration_ms())
    return dest
