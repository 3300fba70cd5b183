#!/usr/bin/env python3
"""
Pocket API client.
Performs the OAuth handshake and derives tag counts from a user's saved items.
"""

import logging
from typing import Dict, Iterable, List, Optional, Callable, TypeVar
import requests
from requests import Session

from data_parser import parse_access_token, parse_list_response, parse_request_token
from errors import DecodeError, RemoteError, TransportError
from models import AccessTokenResult, ListResponse, RequestTokenResult, SavedItem, TagSummary

logger = logging.getLogger(__name__)

POCKET_API_URL = "https://getpocket.com/v3"
POCKET_AUTH_URL = "https://getpocket.com"
DEFAULT_TIMEOUT = 30

# Pocket expects this pair even though the body is form-encoded
API_HEADERS = {
    "Content-Type": "application/json; charset=UTF-8",
    "X-Accept": "application/json",
}

T = TypeVar("T")


def build_authorization_url(request_token: str, redirect_uri: str) -> str:
    """
    Build the page the user must visit to approve the request token.

    Both values are inserted as given; callers pass them already encoded if
    they need to be.
    """
    return (
        f"{POCKET_AUTH_URL}/oauth/authorize"
        f"?request_token={request_token}&redirect_uri={redirect_uri}"
    )


def count_tags(items: Iterable[SavedItem]) -> List[TagSummary]:
    """
    Count how many items carry each tag name.

    Tag names are unique within an item, so every (item, tag) pair adds one.
    The order of the returned list is unspecified.
    """
    counts: Dict[str, int] = {}
    for item in items:
        for tag in item.tags:
            counts[tag] = counts.get(tag, 0) + 1
    return [TagSummary(tag=tag, item_count=count) for tag, count in counts.items()]


class PocketClient:
    """Stateless wrapper around the Pocket v3 API.

    Holds only the consumer key and the transport, so one instance can be
    shared by callers issuing independent requests.
    """

    def __init__(
        self,
        consumer_key: str,
        session: Optional[Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._consumer_key = consumer_key
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.base_url = POCKET_API_URL

    @property
    def consumer_key(self) -> str:
        return self._consumer_key

    def obtain_request_token(self, redirect_uri: str) -> RequestTokenResult:
        """
        Ask Pocket for a request token.

        Args:
            redirect_uri: Where Pocket sends the user after authorization

        Returns:
            RequestTokenResult with the token in ``code``
        """
        return self._post(
            "/oauth/request",
            {"consumer_key": self._consumer_key, "redirect_uri": redirect_uri},
            parse_request_token,
            log_body=False,
        )

    def build_authorization_url(self, request_token: str, redirect_uri: str) -> str:
        return build_authorization_url(request_token, redirect_uri)

    def convert_request_token_to_access_token(self, request_token: str) -> AccessTokenResult:
        """
        Exchange an authorized request token for an access token.

        Pocket rejects the exchange until the user has approved the token;
        that shows up as a DecodeError or RemoteError and the caller may
        retry once authorization is done.
        """
        return self._post(
            "/oauth/authorize",
            {"consumer_key": self._consumer_key, "code": request_token},
            parse_access_token,
            log_body=False,
        )

    def get_items(self, access_token: str) -> ListResponse:
        """
        Fetch every saved item of the user with complete detail.

        Raises:
            RemoteError: the envelope's ``error`` field is set
        """
        return self._post(
            "/get",
            {
                "consumer_key": self._consumer_key,
                "access_token": access_token,
                "state": "all",
                "detailType": "complete",
            },
            parse_list_response,
        )

    def get_tags_with_article_count(self, access_token: str) -> List[TagSummary]:
        """Return one TagSummary per tag used across the user's items."""
        response = self.get_items(access_token)
        tags = count_tags(response.items.values())
        logger.info(f"Counted {len(tags)} tags across {len(response.items)} items")
        return tags

    def _post(
        self,
        path: str,
        params: Dict[str, str],
        parse: Callable[[object], T],
        log_body: bool = True,
    ) -> T:
        url = f"{self.base_url}{path}"
        logger.info(f"POST {url}")

        try:
            response = self.session.post(
                url, data=params, headers=API_HEADERS, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error during API request to {url}: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        body = response.text
        # OAuth responses carry tokens
        if log_body:
            logger.debug(f"Response body: {body}")

        if not 200 <= response.status_code < 300:
            reason = response.headers.get("X-Error") or response.reason or "no reason given"
            logger.error(f"API request failed with status {response.status_code}: {reason}")
            raise DecodeError(
                f"Pocket returned HTTP {response.status_code}: {reason}",
                body=body,
                status_code=response.status_code,
                error_code=response.headers.get("X-Error-Code"),
            )

        try:
            data = response.json()
        except (ValueError, RecursionError) as e:
            logger.error(f"Invalid JSON response from {url}: {e}")
            raise DecodeError(
                f"Invalid JSON response: {e}", body=body, status_code=response.status_code
            ) from e

        if isinstance(data, dict) and data.get("error") is not None:
            logger.error(f"Pocket reported an error: {data['error']}")
            raise RemoteError(str(data["error"]), body=body)

        try:
            return parse(data)
        except ValueError as e:
            logger.error(f"Unexpected response shape from {url}: {e}")
            raise DecodeError(
                f"Unexpected response shape: {e}", body=body, status_code=response.status_code
            ) from e
