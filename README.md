# chirpapi

Request options and response models for the user lookup, follow and
retweet endpoints of a version 2 social API.

The package builds query strings from option objects and turns decoded
JSON responses into dataclasses. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building query strings

`chirpapi.options` has one options class per endpoint:

- `UserLookupOpts`: `expansions`, `tweet_fields`, `user_fields`
- `UserFollowingLookupOpts` and `UserFollowersLookupOpts`: the same, plus
  `max_results` and `pagination_token`
- `UserRetweetLookupOpts`: `expansions`, `tweet_fields`, `user_fields`,
  `media_fields`, `place_fields`, `poll_fields`

Field and expansion lists may hold strings or `Enum` members (an enum
member contributes its value). Each list is joined with commas. Empty
lists, a `max_results` of zero or less and an empty `pagination_token`
are left out.

`query_params()` returns a dict of the parameters that are set, keyed by
their query names (`expansions`, `tweet.fields`, `user.fields`,
`media.fields`, `place.fields`, `poll.fields`, `max_results`,
`pagination_token`). `add_query(url)` returns a new URL with those
parameters added to any query the URL already has; the combined query is
encoded with its keys sorted. A URL that ends up with no query
parameters is returned unchanged.

```python
from chirpapi.options import UserFollowingLookupOpts, UserRetweetLookupOpts

opts = UserFollowingLookupOpts(
    user_fields=["created_at", "description"],
    max_results=100,
    pagination_token="token",
)
opts.query_params()
# {'user.fields': 'created_at,description', 'max_results': '100',
#  'pagination_token': 'token'}

url = UserRetweetLookupOpts(expansions=["pinned_tweet_id"]).add_query(
    "https://api.example.com/2/tweets/123/retweeted_by"
)
# 'https://api.example.com/2/tweets/123/retweeted_by?expansions=pinned_tweet_id'
```

## Reading responses

Every response class has a `from_dict(data)` class method that takes the
decoded JSON body. Users, tweets and errors are kept as the plain dicts
found in the body.

`chirpapi.user_raw`:

- `UserLookupResponse` with `raw: UserRaw`; its `data` may be a single
  user or a list of users.
- `UserFollowingLookupResponse` and `UserFollowersLookupResponse` with
  `raw` and `meta` (`result_count`, `next_token`, `previous_token`).
- `UserFollowsResponse` (`data.following`, `data.pending_follow`) and
  `UserDeleteFollowsResponse` (`data.following`).
- `UserRaw` holds `users`, `includes` (a `UserRawIncludes` or `None`) and
  `errors`. `UserRaw.from_dict` expects `data` to be a list;
  `UserRaw.from_single` expects a single user.

```python
import json
from chirpapi.user_raw import UserFollowingLookupResponse

response = UserFollowingLookupResponse.from_dict(json.loads(body))
for user_id, entry in response.raw.user_dictionaries().items():
    print(user_id, entry.user["username"], entry.pinned_tweet)
if response.meta is not None:
    print(response.meta.next_token)
```

`UserRaw.user_dictionaries()` maps each user's id to a `UserDictionary`
pairing the user with the included tweet whose id is the user's
`pinned_tweet_id` (or `None`). `UserRawIncludes.tweets_by_id()` maps the
included tweets by id. Both results are computed once and then cached.

`chirpapi.retweet`:

- `UserRetweetResponse` and `DeleteUserRetweetResponse` with
  `data.retweeted`.
- `UserRetweetLookupResponse` with `raw: UserRetweetRaw` (`users`,
  `includes.tweets`, `errors`) and `meta.result_count`.

```python
from chirpapi.retweet import UserRetweetResponse

UserRetweetResponse.from_dict({"data": {"retweeted": True}}).data.retweeted  # True
```

## What the package does not do

There is no HTTP client here: the package sends no requests, adds no
authorization headers, checks no status codes and does not raise on
error responses. Fetch the body with the HTTP library of your choice,
decode it, and pass the result to `from_dict`.