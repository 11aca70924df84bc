"""
http_client.py - HTTP Client for the Challenge API
===================================================
This module handles the HTTP communication with the challenge service:
- Posting JSON bodies with an optional per-request Bearer token
- Managing the HTTP session and its timeout

Each call is issued exactly once. There is no retry: a failed request is
reported back to the caller, which decides that the run is over.
"""

import requests
from .config import Settings


# =============================================================================
# HTTP CLIENT CLASS
# =============================================================================

class HttpClient:
    """
    HTTP client for communicating with the challenge API.

    Usage:
        with HttpClient(settings) as client:
            status, content_type, body = client.post_json(
                client.url_for("/generateWebhook/JAVA"),
                {"name": "John", "regNo": "REG12347", "email": "john@example.com"},
            )
    """

    def __init__(self, settings: Settings):
        self.settings = settings

        # One Session for both calls (connection pooling)
        # Accept is set per request: the submission response is opaque text
        self.s = requests.Session()

        self.base = settings.base_url
        self.timeout = settings.timeout_sec

    def url_for(self, path: str) -> str:
        """Join the configured base URL with an endpoint path."""
        return f"{self.base}/{path.lstrip('/')}"

    # -------------------------------------------------------------------------
    # API REQUEST METHODS
    # -------------------------------------------------------------------------

    def post_json(
        self,
        url: str,
        payload: dict,
        token: str | None = None,
        accept: str | None = None,
    ):
        """
        POST a JSON body to an absolute URL.

        Args:
            url: The full URL to post to
            payload: A JSON-serializable dict sent as the request body
            token: Optional Bearer token, sent on this request only
            accept: Optional Accept header value, sent on this request only

        Returns:
            A tuple of (status_code, content_type, body). On a network error
            (timeout, connection refused, DNS failure) the status is 0 and
            the body describes the error.
        """
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"  # Standard Bearer token format
        if accept:
            headers["Accept"] = accept

        try:
            r = self.s.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            return 0, "", f"Network error: {type(e).__name__}: {e}"

        return (
            r.status_code,
            r.headers.get("content-type", ""),
            r.text or "",
        )

    # -------------------------------------------------------------------------
    # CLEANUP METHODS
    # -------------------------------------------------------------------------

    def close(self):
        """Close the HTTP session and release resources."""
        self.s.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
