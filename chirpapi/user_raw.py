"""Response models for the user lookup and follow endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class UserDictionary:
    """A user together with its pinned tweet, if included."""

    user: dict
    pinned_tweet: Optional[dict] = None


@dataclass
class UserRawIncludes:
    """Tweets returned alongside users."""

    tweets: list = field(default_factory=list)
    _by_id: Optional[dict] = field(default=None, init=False, repr=False, compare=False)

    def tweets_by_id(self) -> dict[str, dict]:
        """Return a cached mapping of tweet id to tweet."""
        if self._by_id is None:
            self._by_id = {tweet["id"]: tweet for tweet in self.tweets}
        return self._by_id

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional[UserRawIncludes]:
        return None if data is None else cls(list(data.get("tweets") or []))


@dataclass
class UserRaw:
    """Users, includes and partial errors of a user response."""

    users: list = field(default_factory=list)
    includes: Optional[UserRawIncludes] = None
    errors: list = field(default_factory=list)
    _dicts: Optional[dict] = field(default=None, init=False, repr=False, compare=False)

    def user_dictionaries(self) -> dict[str, UserDictionary]:
        """Return a cached mapping of user id to its dictionary."""
        if self._dicts is None:
            tweets = self.includes.tweets_by_id() if self.includes else {}
            self._dicts = {
                user["id"]: UserDictionary(user, tweets.get(user.get("pinned_tweet_id")))
                for user in self.users
            }
        return self._dicts

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserRaw:
        """Build from a response whose ``data`` is a list of users."""
        return cls(
            list(data.get("data") or []),
            UserRawIncludes.from_dict(data.get("includes")),
            list(data.get("errors") or []),
        )

    @classmethod
    def from_single(cls, data: dict[str, Any]) -> UserRaw:
        """Build from a response whose ``data`` is a single user."""
        user = data.get("data")
        return cls.from_dict({**data, "data": [] if user is None else [user]})


@dataclass
class UserLookupResponse:
    raw: UserRaw

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserLookupResponse:
        if isinstance(data.get("data"), dict):
            return cls(UserRaw.from_single(data))
        return cls(UserRaw.from_dict(data))


@dataclass
class UserFollowsData:
    following: bool = False
    pending_follow: bool = False


@dataclass
class UserFollowsResponse:
    data: Optional[UserFollowsData] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserFollowsResponse:
        body = data.get("data")
        if body is None:
            return cls()
        return cls(UserFollowsData(bool(body.get("following")), bool(body.get("pending_follow"))))


@dataclass
class UserDeleteFollowsData:
    following: bool = False


@dataclass
class UserDeleteFollowsResponse:
    data: Optional[UserDeleteFollowsData] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserDeleteFollowsResponse:
        body = data.get("data")
        return cls(None if body is None else UserDeleteFollowsData(bool(body.get("following"))))


@dataclass
class UserFollowingMeta:
    """Paging metadata of the user following endpoint."""

    result_count: int = 0
    next_token: str = ""
    previous_token: str = ""


@dataclass
class UserFollowersMeta(UserFollowingMeta):
    """Paging metadata of the user followers endpoint."""


def _paging_meta(meta: Optional[dict[str, Any]], kind: type) -> Any:
    if meta is None:
        return None
    return kind(
        int(meta.get("result_count", 0)),
        meta.get("next_token", ""),
        meta.get("previous_token", ""),
    )


@dataclass
class UserFollowingLookupResponse:
    """A page of followed users, with paging metadata."""

    raw: UserRaw
    meta: Optional[UserFollowingMeta] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserFollowingLookupResponse:
        return cls(UserRaw.from_dict(data), _paging_meta(data.get("meta"), UserFollowingMeta))


@dataclass
class UserFollowersLookupResponse:
    """A page of followers, with paging metadata."""

    raw: UserRaw
    meta: Optional[UserFollowersMeta] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserFollowersLookupResponse:
        return cls(UserRaw.from_dict(data), _paging_meta(data.get("meta"), UserFollowersMeta))