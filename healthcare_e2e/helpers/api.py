"""
API Request Helpers

Thin wrappers over a Playwright APIRequestContext. Each returns
``{"status": <int>, "data": <parsed JSON body>}``.

No retries and no timeout policy beyond the request context's defaults.
"""
import logging
from typing import Any, Callable, Dict

from playwright.sync_api import APIRequestContext, APIResponse

from .exceptions import HelperError

logger = logging.getLogger(__name__)


def _send(verb: str, call: Callable[..., APIResponse], url: str, **kwargs) -> Dict[str, Any]:
    try:
        response = call(url, **kwargs)
        result = {"status": response.status, "data": response.json()}
    except Exception as e:
        raise HelperError(f"{verb} request failed: {e}") from e

    logger.debug(f"{verb} {url} -> {result['status']}")
    return result


def api_get_request(request: APIRequestContext, base_url: str, endpoint: str) -> Dict[str, Any]:
    """GET ``base_url + endpoint``."""
    return _send("GET", request.get, f"{base_url}{endpoint}")


def api_post_request(
    request: APIRequestContext, base_url: str, endpoint: str, payload: Dict[str, Any]
) -> Dict[str, Any]:
    """POST ``payload`` as JSON to ``base_url + endpoint``."""
    return _send("POST", request.post, f"{base_url}{endpoint}", data=payload)


def api_put_request(
    request: APIRequestContext, base_url: str, endpoint: str, payload: Dict[str, Any]
) -> Dict[str, Any]:
    """PUT ``payload`` as JSON to ``base_url + endpoint``."""
    return _send("PUT", request.put, f"{base_url}{endpoint}", data=payload)


def api_patch_request(
    request: APIRequestContext, base_url: str, endpoint: str, payload: Dict[str, Any]
) -> Dict[str, Any]:
    """PATCH ``payload`` as JSON to ``base_url + endpoint``."""
    return _send("PATCH", request.patch, f"{base_url}{endpoint}", data=payload)


def api_delete_request(request: APIRequestContext, base_url: str, endpoint: str) -> Dict[str, Any]:
    """DELETE ``base_url + endpoint``."""
    return _send("DELETE", request.delete, f"{base_url}{endpoint}")
