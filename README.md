# linebot-models

Plain Python models for the LINE Messaging API: webhook events, emojis,
demographic filters for narrowcasts, the enumerations of flex message values,
and the errors the API reports. Events decode from and encode to the JSON the
platform sends; filters and emojis encode to the JSON the API expects.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Webhook events

`linebot_models.event.Event` holds one webhook event.

```python
from linebot_models.event import Event, EventType, TextMessage

event = Event.from_json(request_body)  # str, bytes or bytearray
if event.type is EventType.MESSAGE and isinstance(event.message, TextMessage):
    print(event.message.text)
```

- `Event.from_json(body)` and `Event.from_dict(data)` decode an event;
  `Event.to_dict()` and `Event.to_json()` encode it back. `to_json()` gives
  compact JSON with non-ASCII text kept as is.
- The timestamp is decoded into a timezone-aware UTC `datetime` and encoded as
  milliseconds since the epoch; a naive `datetime` is taken as UTC.
- Known values of `type`, `mode` and the other enumerated fields decode into
  `EventType`, `EventMode`, `EventSourceType`, `BeaconEventType`,
  `AccountLinkResult`, `ThingsResultCode`, `ThingsActionResultType` and
  `StickerResourceType`; unknown values are kept as plain strings.
- A message event carries one of `TextMessage`, `ImageMessage`,
  `VideoMessage`, `AudioMessage`, `FileMessage`, `LocationMessage` or
  `StickerMessage` in `message`; a message of another type leaves `message`
  as `None`.
- Postback, beacon, account link, member joined/left, things, unsend and
  video play complete events fill `postback`, `beacon`, `account_link`,
  `members`, `things`, `unsend` and `video_play_complete`. The beacon device
  message is decoded from hex into `bytes`.
- A message, beacon, account link, member or things event without its object
  raises `ValueError`, as does a beacon device message that is not valid hex
  and encoding a things event that has no `things`. A field of the wrong JSON
  type raises `TypeError`.

`EventSource`, `Params` and `Postback` also have `to_dict()` and
`from_dict(data)` of their own.

## Emojis

```python
from linebot_models.emoji import Emoji

Emoji(index=0, product_id="5ac1bfd5040ab15980c9b435", emoji_id="001").to_dict()
# {'index': 0, 'productId': '5ac1bfd5040ab15980c9b435', 'emojiId': '001'}
```

Empty `length`, `product_id` and `emoji_id` are left out of the output.
`Emoji.from_dict(data)` reads one back and raises `TypeError` on fields of
the wrong type.

## Demographic filters

```python
from linebot_models.demographic import (
    AgeFilter, AgeType, GenderFilter, GenderType, operator_and,
)

audience = operator_and(
    GenderFilter([GenderType.FEMALE]),
    AgeFilter(gte=AgeType.AGE_20, lt=AgeType.AGE_40),
)
audience.to_dict()
# {'type': 'operator',
#  'and': [{'type': 'gender', 'oneOf': ['female']},
#          {'type': 'age', 'gte': 'age_20', 'lt': 'age_40'}]}
```

The filters are `GenderFilter`, `AgeFilter`, `AppTypeFilter`, `AreaFilter`,
`SubscriptionPeriodFilter` and `DemographicFilterOperator`, built with
`operator_and(*filters)`, `operator_or(*filters)` and `operator_not(filter)`.
Each has `to_dict()` and `to_json()`; empty age and period bounds are left out.

## Flex message values

`linebot_models.flex_types` defines string enumerations of the values flex
messages use, such as `FlexContainerType`, `FlexComponentType`,
`FlexBoxLayoutType`, `FlexTextSizeType` and `FlexImageAspectRatioType`
(`FlexImageAspectRatioType.RATIO_20TO13.value == "20:13"`). Each member
compares equal to its string value.

## Errors

`linebot_models.errors` defines `LineBotError`, the base of the errors here,
`InvalidSignatureError` (message `"invalid signature"`), and `APIError`, which
holds an HTTP status `code`, an optional `message` and a tuple of
`APIErrorDetail(property, message)`:

```python
from linebot_models.errors import APIError, APIErrorDetail

str(APIError(400, "Bad request", [APIErrorDetail("messages[0].text", "May not be empty")]))
# 'linebot: APIError 400 Bad request\n[messages[0].text] May not be empty'
```

## What this package does not do

It holds data models only. It has no HTTP client for the API, no webhook
server and no signature check. It has no models for template or quick reply
actions, and no classes for flex containers or components: flex JSON can be
neither built nor decoded into objects here, only its enumerated values are
provided.