"""HTTP transport for snoo.

Talks to Reddit's OAuth API host. Every service in ``snoo.services`` is
handed one of these and only ever calls ``get`` or ``post_form``.
Token acquisition is not handled here: pass an already-issued bearer token.
"""

from typing import Any, Optional
from urllib.parse import urljoin

import requests
from loguru import logger

DEFAULT_BASE_URL = "https://oauth.reddit.com/"
USER_AGENT = "snoo/0.1.0 (Reddit API client; +https://github.com/user/snoo)"


class RedditClient:
    """Simple synchronous HTTP client for the Reddit REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        access_token: Optional[str] = None,
        user_agent: str = USER_AGENT,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ):
        if not base_url.endswith("/"):
            base_url += "/"
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = user_agent
        if access_token:
            self.session.headers["Authorization"] = f"bearer {access_token}"

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.session.close()

    def url_for(self, path: str) -> str:
        """Resolve an API path like 'api/info' against the base URL."""
        return urljoin(self.base_url, path.lstrip("/"))

    def get(self, path: str, params: dict = None) -> Any:
        """GET {base_url}/{path} with params.

        Args:
            path: API path (e.g., 'api/info')
            params: Query parameters

        Returns:
            Parsed JSON response, or None for an empty body
        """
        params = dict(params or {})
        params["raw_json"] = 1  # Avoid HTML entity escaping
        logger.debug("GET {} params={}", path, params)
        resp = self.session.get(self.url_for(path), params=params, timeout=self.timeout)
        return self._decode(resp)

    def post_form(self, path: str, form: dict) -> Any:
        """POST a form-encoded body to {base_url}/{path}.

        Returns:
            Parsed JSON response, or None for an empty body
        """
        logger.debug("POST {} form={}", path, form)
        resp = self.session.post(self.url_for(path), data=form, timeout=self.timeout)
        return self._decode(resp)

    @staticmethod
    def _decode(resp: requests.Response) -> Any:
        resp.raise_for_status()
        if not resp.content:
            return None
        return resp.json()
