"""Contains the YouTubeSession class which is used to authorize and send the
requests made to the YouTube Data and Analytics APIs.
"""

__all__ = ["YouTubeSession"]

import logging
import os
from collections.abc import Callable
from http import HTTPStatus
from types import TracebackType
from typing import Any, Self

from httpx import Client, Response

from ytvideo.errors import HTTPError, Unauthorized
from ytvideo.models import SessionConfig
from ytvideo.types import T


class YouTubeSession:
    """A class that holds the identity used to talk to YouTube and sends the
    HTTP requests on its behalf.
    """

    LIMIT_REASONS = frozenset(
        {
            "quotaExceeded",
            "rateLimitExceeded",
            "userRateLimitExceeded",
            "dailyLimitExceeded",
        }
    )
    """The reasons of 403 responses that report a usage limit rather than a
    missing permission."""

    def __init__(
        self,
        *,
        access_token: str | None = None,
        api_key: str | None = None,
        owner_name: str | None = None,
        config: SessionConfig | None = None,
        client: Client | None = None,
    ) -> None:
        """Set up the YouTubeSession instance.

        :param access_token: The OAuth access token of the account.
            Required for requests that read private data or change a video.
        :param api_key: The API key used for reading public data when no access
            token is given.
        :param owner_name: The name of the content owner the account manages.
            If provided, analytics are queried as the content owner instead of
            as the channel.
        :param config: The configuration of the session. If not provided, the
            default configuration will be used.
        :param client: The httpx client to send requests with. If not provided,
            a new instance will be created and closed with the session.
        """
        self._logger = logging.getLogger(self.__class__.__name__)

        self._access_token = access_token
        self._api_key = api_key
        self._owner_name = owner_name
        self._config = config or SessionConfig()
        self._owns_client = client is None
        self._client = client or Client(timeout=self._config.timeout)

    @classmethod
    def from_env(cls, *, client: Client | None = None) -> Self:
        """Create a session from the environment variables YOUTUBE_ACCESS_TOKEN,
        YOUTUBE_API_KEY, YOUTUBE_OWNER_NAME and the YTVIDEO_* variables read by
        :meth:`SessionConfig.from_env`.

        :param client: The httpx client to send requests with.
        :return: The session.
        """
        return cls(
            access_token=os.getenv("YOUTUBE_ACCESS_TOKEN"),
            api_key=os.getenv("YOUTUBE_API_KEY"),
            owner_name=os.getenv("YOUTUBE_OWNER_NAME"),
            config=SessionConfig.from_env(),
            client=client,
        )

    @property
    def config(self) -> SessionConfig:
        """Get the configuration of the session.

        :return: The configuration.
        """
        return self._config

    @property
    def owner_name(self) -> str | None:
        """Get the name of the content owner the account acts as.

        :return: The content owner name, or None if the account is a channel.
        """
        return self._owner_name

    @property
    def is_authenticated(self) -> bool:
        """Check if the session holds an access token.

        :return: True if an access token is available, False otherwise.
        """
        return bool(self._access_token)

    def data_url(self, path: str) -> str:
        """Get the URL of a YouTube Data API endpoint.

        :param path: The path of the endpoint, e.g. "videos".
        :return: The absolute URL.
        """
        return f"{self._config.data_api_url.rstrip('/')}/{path.lstrip('/')}"

    def analytics_url(self, path: str) -> str:
        """Get the URL of a YouTube Analytics API endpoint.

        :param path: The path of the endpoint, e.g. "reports".
        :return: The absolute URL.
        """
        return f"{self._config.analytics_api_url.rstrip('/')}/{path.lstrip('/')}"

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        authenticated: bool = False,
    ) -> dict[str, Any]:
        """Send a GET request and parse the JSON response.

        :param url: The URL to send the request to.
        :param params: The query parameters.
        :param authenticated: Whether the request requires an access token.
        :return: The parsed response.
        :raises Unauthorized: If the session is not allowed to send the request.
        :raises HTTPError: If YouTube responds with any other error.
        """
        response = self._send("GET", url, params, authenticated=authenticated)
        return response.json()

    def get_text(self, url: str, params: dict[str, Any] | None = None) -> str:
        """Send an unauthenticated GET request and return the raw body.

        :param url: The URL to send the request to.
        :param params: The query parameters.
        :return: The body of the response.
        :raises HTTPError: If the server responds with an error.
        """
        response = self._send("GET", url, params, authenticated=False, sign=False)
        return response.text

    def do_delete(
        self,
        url: str,
        params: dict[str, Any],
        on_success: Callable[[], T],
    ) -> T:
        """Send an authenticated DELETE request.

        :param url: The URL to send the request to.
        :param params: The query parameters.
        :param on_success: The function called when the request succeeds.
        :return: The return value of on_success.
        :raises Unauthorized: If the session is not allowed to delete.
        :raises HTTPError: If YouTube responds with any other error.
        """
        self._send("DELETE", url, params, authenticated=True)
        return on_success()

    def do_update(
        self,
        url: str,
        params: dict[str, Any],
        body: dict[str, Any],
        on_success: Callable[[dict[str, Any]], T],
    ) -> T:
        """Send an authenticated PUT request with a JSON body.

        :param url: The URL to send the request to.
        :param params: The query parameters.
        :param body: The JSON body.
        :param on_success: The function called with the parsed response when the
            request succeeds.
        :return: The return value of on_success.
        :raises Unauthorized: If the session is not allowed to update.
        :raises HTTPError: If YouTube responds with any other error.
        """
        response = self._send("PUT", url, params, authenticated=True, json=body)
        return on_success(response.json())

    def do_post(
        self,
        url: str,
        params: dict[str, Any],
        on_success: Callable[[], T],
    ) -> T:
        """Send an authenticated POST request without a body.

        :param url: The URL to send the request to.
        :param params: The query parameters.
        :param on_success: The function called when the request succeeds.
        :return: The return value of on_success.
        :raises Unauthorized: If the session is not allowed to send the request.
        :raises HTTPError: If YouTube responds with any other error.
        """
        self._send("POST", url, params, authenticated=True)
        return on_success()

    def _send(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None,
        *,
        authenticated: bool,
        sign: bool = True,
        json: dict[str, Any] | None = None,
    ) -> Response:
        """Send a request and raise an error if it failed.

        :param method: The HTTP method.
        :param url: The URL to send the request to.
        :param params: The query parameters.
        :param authenticated: Whether the request requires an access token.
        :param sign: Whether to attach the access token or the API key.
        :param json: The JSON body, if any.
        :return: The successful response.
        :raises Unauthorized: If the session is not allowed to send the request.
        :raises HTTPError: If the server responds with any other error.
        """
        if authenticated and not self.is_authenticated:
            raise Unauthorized(f"An access token is required for {method} {url}")

        params = dict(params or {})
        headers = {}
        if sign:
            if self._access_token:
                headers["Authorization"] = f"Bearer {self._access_token}"
            elif self._api_key:
                params["key"] = self._api_key

        self._logger.debug("Sending %s request to %s", method, url)

        response = self._client.request(
            method, url, params=params, headers=headers, json=json
        )

        denied = response.status_code in (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN)
        if denied and self._get_reason(response) not in self.LIMIT_REASONS:
            raise Unauthorized(self._get_message(response), response.status_code)

        if response.is_error:
            raise HTTPError(self._get_message(response), response.status_code)

        return response

    @staticmethod
    def _get_message(response: Response) -> str:
        """Get the error message from an error response of the Google APIs.

        :param response: The error response.
        :return: The message sent by the server, or the reason phrase.
        """
        try:
            return response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return response.reason_phrase or f"{response.request.method} failed"

    @staticmethod
    def _get_reason(response: Response) -> str | None:
        """Get the reason of the first error of an error response of the Google
        APIs, e.g. "forbidden" or "quotaExceeded".

        :param response: The error response.
        :return: The reason, or None if the response does not have one.
        """
        try:
            return response.json()["error"]["errors"][0]["reason"]
        except (ValueError, KeyError, IndexError, TypeError):
            return None

    def close(self) -> None:
        """Close the httpx client if it was created by the session."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
