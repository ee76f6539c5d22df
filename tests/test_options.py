from enum import Enum
from urllib.parse import parse_qs, urlsplit

import pytest

from chirpapi.options import (
    UserFollowersLookupOpts,
    UserFollowingLookupOpts,
    UserLookupOpts,
    UserRetweetLookupOpts,
)

BASE = "https://www.test.com/2/users/2244994945/blocking"


class _Field(Enum):
    CREATED_AT = "created_at"
    DESCRIPTION = "description"


def _query(url):
    return parse_qs(urlsplit(url).query)


def test_lookup_params_joined_with_commas():
    opts = UserLookupOpts(
        expansions=["pinned_tweet_id"],
        user_fields=["created_at", "description"],
        tweet_fields=["created_at"],
    )
    assert opts.query_params() == {
        "expansions": "pinned_tweet_id",
        "tweet.fields": "created_at",
        "user.fields": "created_at,description",
    }


def test_enum_values_are_used():
    opts = UserLookupOpts(user_fields=[_Field.CREATED_AT, _Field.DESCRIPTION])
    assert opts.query_params() == {"user.fields": "created_at,description"}


def test_empty_options_leave_url_unchanged():
    assert UserLookupOpts().add_query(BASE) == BASE
    assert UserRetweetLookupOpts().add_query(BASE) == BASE


def test_add_query_round_trip():
    opts = UserLookupOpts(
        expansions=["pinned_tweet_id"], user_fields=["created_at", "description"]
    )
    url = opts.add_query(BASE)
    assert url.startswith(BASE + "?")
    assert _query(url) == {
        "expansions": ["pinned_tweet_id"],
        "user.fields": ["created_at,description"],
    }


def test_add_query_encodes_comma_and_sorts_keys():
    opts = UserLookupOpts(user_fields=["name", "id"], expansions=["author_id"])
    url = opts.add_query(BASE)
    assert urlsplit(url).query == "expansions=author_id&user.fields=name%2Cid"


def test_existing_query_is_kept():
    opts = UserLookupOpts(expansions=["pinned_tweet_id"])
    url = opts.add_query(BASE + "?zeta=1")
    query = urlsplit(url).query
    assert _query(url) == {"expansions": ["pinned_tweet_id"], "zeta": ["1"]}
    assert query.index("expansions") < query.index("zeta")


@pytest.mark.parametrize("cls", [UserFollowingLookupOpts, UserFollowersLookupOpts])
def test_paged_options(cls):
    opts = cls(user_fields=["username"], max_results=100, pagination_token="token")
    assert opts.query_params() == {
        "user.fields": "username",
        "max_results": "100",
        "pagination_token": "token",
    }
    assert _query(opts.add_query(BASE)) == {
        "user.fields": ["username"],
        "max_results": ["100"],
        "pagination_token": ["token"],
    }


@pytest.mark.parametrize("cls", [UserFollowingLookupOpts, UserFollowersLookupOpts])
def test_paged_options_skip_unset_values(cls):
    opts = cls(max_results=0, pagination_token="")
    assert opts.query_params() == {}
    assert opts.add_query(BASE) == BASE


def test_retweet_options_all_fields():
    opts = UserRetweetLookupOpts(
        expansions=["pinned_tweet_id"],
        tweet_fields=["created_at"],
        user_fields=["created_at", "description"],
        media_fields=["type", "duration_ms"],
        place_fields=["country"],
        poll_fields=["options"],
    )
    params = opts.query_params()
    assert list(params) == [
        "expansions",
        "tweet.fields",
        "user.fields",
        "media.fields",
        "place.fields",
        "poll.fields",
    ]
    assert params["media.fields"] == "type,duration_ms"
    assert _query(opts.add_query(BASE))["poll.fields"] == ["options"]