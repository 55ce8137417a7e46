"""Change notification sink posting snapshots to a RESTful endpoint."""

from __future__ import annotations

import platform
import re

import requests

from ipwatch.config import WatchConfig
from ipwatch.utils.logger import Logger


# RFC 9110 token characters allowed in a method name.
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def user_agent() -> str:
    """Return ``<os>/<arch>`` for the running host (e.g. ``linux/x86_64``)."""
    return f"{platform.system().lower()}/{platform.machine().lower()}"


class RestfulNotifier:
    """Send one HTTP request per detected change.

    Requests are fire-and-forget: no timeout, no retry, and every failure
    is logged instead of raised.
    """

    def __init__(
        self, config: WatchConfig, session: requests.Session | None = None
    ) -> None:
        self._config = config
        self._session = session or requests.Session()
        self._log = Logger.get("notify")

    def build_request(self, body: bytes) -> requests.PreparedRequest:
        """Prepare the notification request carrying ``body``.

        Raises
        ------
            ValueError, requests.RequestException: If the URL or method is unusable.
        """
        method = self._config.restful_method
        if not _METHOD_TOKEN.fullmatch(method):
            raise ValueError(f"invalid HTTP method {method!r}")

        headers = {}
        header = self._config.header()
        if header is not None:
            headers[header[0]] = header[1]
        headers["Content-Type"] = "application/json"
        headers["User-Agent"] = user_agent()

        request = requests.Request(
            method=method,
            url=self._config.restful_url,
            headers=headers,
            data=body,
        )
        return request.prepare()

    def notify(self, body: bytes) -> str | None:
        """Deliver ``body`` to the configured endpoint.

        Returns
        -------
            The response status line, or None when nothing was sent or the
            request failed.
        """
        if not self._config.notification_enabled:
            return None

        try:
            prepared = self.build_request(body)
        except (ValueError, requests.RequestException) as e:
            self._log.error(f"new restful request fail, {e}")
            return None

        try:
            response = self._session.send(prepared, stream=True)
        except (requests.RequestException, ValueError) as e:
            self._log.error(f"do restful request fail, {e}")
            return None

        try:
            status = f"{response.status_code} {response.reason or ''}".strip()
            self._log.info(f"restful response status: {status}")
            return status
        finally:
            response.close()
