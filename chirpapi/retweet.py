"""Response models for the manage-retweet and retweeted-by endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class RetweetData:
    retweeted: bool = False


def _retweet_data(data: dict[str, Any]) -> Optional[RetweetData]:
    body = data.get("data")
    return None if body is None else RetweetData(bool(body.get("retweeted")))


@dataclass
class UserRetweetResponse:
    """Result of retweeting a tweet."""

    data: Optional[RetweetData] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserRetweetResponse:
        return cls(_retweet_data(data))


@dataclass
class DeleteUserRetweetResponse:
    """Result of removing a retweet."""

    data: Optional[RetweetData] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeleteUserRetweetResponse:
        return cls(_retweet_data(data))


@dataclass
class UserRetweetMeta:
    result_count: int = 0


@dataclass
class UserRetweetRawIncludes:
    tweets: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> Optional[UserRetweetRawIncludes]:
        return None if data is None else cls(list(data.get("tweets") or []))


@dataclass
class UserRetweetRaw:
    users: list = field(default_factory=list)
    includes: Optional[UserRetweetRawIncludes] = None
    errors: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserRetweetRaw:
        return cls(
            list(data.get("data") or []),
            UserRetweetRawIncludes.from_dict(data.get("includes")),
            list(data.get("errors") or []),
        )


@dataclass
class UserRetweetLookupResponse:
    raw: UserRetweetRaw
    meta: Optional[UserRetweetMeta] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserRetweetLookupResponse:
        meta = data.get("meta")
        return cls(
            UserRetweetRaw.from_dict(data),
            None if meta is None else UserRetweetMeta(int(meta.get("result_count", 0))),
        )