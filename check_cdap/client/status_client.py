# check_cdap/client/status_client.py
"""
Single GET against the CDAP router's system-services status endpoint.
"""
import logging

import httpx

from check_cdap import __version__
from check_cdap.config import CheckConfig
from check_cdap.errors import ConfigError
from check_cdap.models import StatusReply

STATUS_PATH = "/v3/system/services/status"
NO_RESPONSE = 0

_log = logging.getLogger(__name__)


def status_url(uri: str) -> str:
    return uri.rstrip("/") + STATUS_PATH


def request_headers(token: str | None) -> dict[str, str]:
    headers = {"Accept": "application/json", "User-Agent": f"check_cdap/{__version__}"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def client_options(cfg: CheckConfig) -> dict:
    """Keyword arguments for httpx.Client derived from the run config."""
    return {
        "timeout": cfg.timeout,
        "verify": not cfg.insecure,
        "follow_redirects": False,
        "headers": request_headers(cfg.token),
    }


def fetch_status(cfg: CheckConfig, client: httpx.Client | None = None) -> StatusReply:
    """
    GET <uri>/v3/system/services/status and return the raw reply.

    Transport failures (refused, DNS, TLS, timeout) come back as status_code 0
    rather than raising. An unusable URI raises ConfigError.

    Args:
        cfg: resolved run configuration.
        client: optional pre-built client (tests inject one); when given, the
            auth header and timeout are still applied per request.
    """
    url = status_url(cfg.uri)
    _log.debug("GET %s", url)

    try:
        if client is None:
            with httpx.Client(**client_options(cfg)) as c:
                resp = c.get(url)
        else:
            resp = client.get(url, headers=request_headers(cfg.token), timeout=cfg.timeout)
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
        raise ConfigError(f"Invalid CDAP URI {cfg.uri!r}: {e}") from e
    except httpx.TransportError as e:
        _log.debug("no response from %s: %s: %s", url, type(e).__name__, e)
        return StatusReply(status_code=NO_RESPONSE, url=url)

    _log.debug("HTTP %s from %s (%d bytes)", resp.status_code, url, len(resp.content))
    _log.debug("body: %s", resp.text)
    return StatusReply(status_code=resp.status_code, body=resp.text, url=url)
