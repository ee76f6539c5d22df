"""Optional query parameters for the user lookup, follow and retweet endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from operator import itemgetter
from typing import ClassVar, Iterable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_COMMON_KEYS = (
    ("expansions", "expansions"),
    ("tweet.fields", "tweet_fields"),
    ("user.fields", "user_fields"),
)

_MEDIA_KEYS = (
    ("media.fields", "media_fields"),
    ("place.fields", "place_fields"),
    ("poll.fields", "poll_fields"),
)


def _text(value: object) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _join(values: Iterable[object]) -> str:
    return ",".join(_text(v) for v in values)


def _merge_query(url: str, params: dict[str, str]) -> str:
    """Return ``url`` with ``params`` added to its query string.

    Keys are sorted in the encoded query; a URL with no query parameters
    at all is returned unchanged.
    """
    parts = urlsplit(url)
    pairs = parse_qsl(parts.query, keep_blank_values=True)
    pairs.extend(params.items())
    if not pairs:
        return url
    pairs.sort(key=itemgetter(0))
    return urlunsplit(parts._replace(query=urlencode(pairs)))


@dataclass
class _FieldOpts:
    """Expansions and field lists shared by every option set."""

    _keys: ClassVar[tuple[tuple[str, str], ...]] = _COMMON_KEYS

    expansions: list = field(default_factory=list)
    tweet_fields: list = field(default_factory=list)
    user_fields: list = field(default_factory=list)

    def _params(self) -> dict[str, str]:
        params = {}
        for key, attr in self._keys:
            values = getattr(self, attr)
            if values:
                params[key] = _join(values)
        return params


@dataclass
class _PagedOpts(_FieldOpts):
    """Field options with result-count and pagination controls."""

    max_results: int = 0
    pagination_token: str = ""

    def _params(self) -> dict[str, str]:
        params = super()._params()
        if self.max_results > 0:
            params["max_results"] = str(self.max_results)
        if self.pagination_token:
            params["pagination_token"] = self.pagination_token
        return params


@dataclass
class UserLookupOpts(_FieldOpts):
    """Options for the user lookup endpoints."""

    def query_params(self) -> dict[str, str]:
        """Return the query parameters these options set, in request order."""
        return self._params()

    def add_query(self, url: str) -> str:
        """Return ``url`` with these options merged into its query string."""
        return _merge_query(url, self.query_params())


@dataclass
class UserFollowingLookupOpts(_PagedOpts):
    """Options for the user following endpoint."""

    def query_params(self) -> dict[str, str]:
        """Return the query parameters these options set, in request order."""
        return self._params()

    def add_query(self, url: str) -> str:
        """Return ``url`` with these options merged into its query string."""
        return _merge_query(url, self.query_params())


@dataclass
class UserFollowersLookupOpts(_PagedOpts):
    """Options for the user followers endpoint."""

    def query_params(self) -> dict[str, str]:
        """Return the query parameters these options set, in request order."""
        return self._params()

    def add_query(self, url: str) -> str:
        """Return ``url`` with these options merged into its query string."""
        return _merge_query(url, self.query_params())


@dataclass
class UserRetweetLookupOpts(_FieldOpts):
    """Options for the retweeted-by user lookup."""

    _keys: ClassVar[tuple[tuple[str, str], ...]] = _COMMON_KEYS + _MEDIA_KEYS

    media_fields: list = field(default_factory=list)
    place_fields: list = field(default_factory=list)
    poll_fields: list = field(default_factory=list)

    def query_params(self) -> dict[str, str]:
        """Return the query parameters these options set, in request order."""
        return self._params()

    def add_query(self, url: str) -> str:
        """Return ``url`` with these options merged into its query string."""
        return _merge_query(url, self.query_params())