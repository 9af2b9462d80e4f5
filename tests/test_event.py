from datetime import datetime, timezone

import pytest

from linebot_models.emoji import Emoji
from linebot_models.event import (
    AccountLinkResult,
    AudioMessage,
    Beacon,
    BeaconEventType,
    Event,
    EventMode,
    EventSource,
    EventSourceType,
    EventType,
    FileMessage,
    ImageMessage,
    LocationMessage,
    Params,
    Postback,
    StickerMessage,
    StickerResourceType,
    TextMessage,
    Things,
    ThingsResultCode,
    VideoMessage,
)

SOURCE = {"type": "user", "userId": "U0001"}
STAMP = 1462629479859


def _event(**extra):
    base = {
        "replyToken": "reply",
        "type": "message",
        "mode": "active",
        "timestamp": STAMP,
        "source": SOURCE,
    }
    base.update(extra)
    return base


def test_text_message_event_parses_fields():
    event = Event.from_dict(
        _event(
            message={
                "id": "325708",
                "type": "text",
                "text": "Hello, world",
                "emojis": [{"index": 0, "length": 6, "productId": "p1", "emojiId": "e1"}],
            }
        )
    )
    assert event.type is EventType.MESSAGE
    assert event.mode is EventMode.ACTIVE
    assert event.reply_token == "reply"
    assert event.source == EventSource(type=EventSourceType.USER, user_id="U0001")
    assert isinstance(event.message, TextMessage)
    assert event.message.text == "Hello, world"
    assert event.message.emojis == [Emoji(index=0, product_id="p1", emoji_id="e1", length=6)]


def test_timestamp_is_utc_and_round_trips():
    event = Event.from_dict(_event(message={"id": "1", "type": "image"}))
    assert event.timestamp.tzinfo == timezone.utc
    assert event.to_dict()["timestamp"] == STAMP


@pytest.mark.parametrize(
    "message, cls",
    [
        ({"id": "1", "type": "text", "text": "hi", "mention": {"mentionees": []}}, TextMessage),
        ({"id": "2", "type": "image"}, ImageMessage),
        ({"id": "3", "type": "video"}, VideoMessage),
        ({"id": "4", "type": "audio", "duration": 60000}, AudioMessage),
        ({"id": "5", "type": "file", "fileName": "file.txt", "fileSize": 2138}, FileMessage),
        (
            {
                "id": "6",
                "type": "location",
                "title": "my location",
                "address": "Tokyo",
                "latitude": 35.65910807942215,
                "longitude": 139.70372892916203,
            },
            LocationMessage,
        ),
        (
            {
                "id": "7",
                "type": "sticker",
                "packageId": "1",
                "stickerId": "1",
                "stickerResourceType": "STATIC",
                "keywords": ["cony", "sally"],
            },
            StickerMessage,
        ),
    ],
)
def test_message_events_round_trip(message, cls):
    data = _event(message=message)
    event = Event.from_dict(data)
    assert isinstance(event.message, cls)
    assert event.to_dict() == data


def test_sticker_resource_type_is_enum():
    event = Event.from_dict(
        _event(message={"id": "7", "type": "sticker", "stickerResourceType": "ANIMATION"})
    )
    assert event.message.sticker_resource_type is StickerResourceType.ANIMATION


def test_unknown_message_type_gives_no_message():
    event = Event.from_dict(_event(message={"id": "9", "type": "hologram"}))
    assert event.message is None


def test_message_event_without_message_raises():
    with pytest.raises(ValueError):
        Event.from_dict(_event())


def test_postback_with_params_round_trips():
    data = _event(
        type="postback",
        postback={"data": "DATE", "params": {"date": "2017-09-03"}},
    )
    event = Event.from_dict(data)
    assert event.postback == Postback(data="DATE", params=Params(date="2017-09-03"))
    assert event.to_dict() == data


def test_beacon_device_message_is_hex_decoded():
    data = _event(type="beacon", beacon={"hwid": "374591320", "type": "enter", "dm": "1234"})
    event = Event.from_dict(data)
    assert event.beacon == Beacon(
        hwid="374591320", type=BeaconEventType.ENTER, device_message=b"\x12\x34"
    )
    assert event.to_dict() == data


def test_beacon_invalid_hex_raises():
    with pytest.raises(ValueError):
        Event.from_dict(_event(type="beacon", beacon={"hwid": "1", "type": "enter", "dm": "zz"}))


def test_beacon_without_dm_omits_it():
    event = Event.from_dict(_event(type="beacon", beacon={"hwid": "1", "type": "stay"}))
    assert event.beacon.device_message == b""
    assert "dm" not in event.to_dict()["beacon"]


def test_account_link_round_trips():
    data = _event(type="accountLink", link={"result": "ok", "nonce": "xxxxxxxxxxxxxxx"})
    event = Event.from_dict(data)
    assert event.account_link.result is AccountLinkResult.OK
    assert event.to_dict() == data


def test_member_joined_and_left():
    members = [{"type": "user", "userId": "U1"}, {"type": "user", "userId": "U2"}]
    joined = _event(type="memberJoined", joined={"members": members})
    event = Event.from_dict(joined)
    assert [m.user_id for m in event.members] == ["U1", "U2"]
    assert event.to_dict() == joined
    left = _event(type="memberLeft", left={"members": members[:1]})
    assert Event.from_dict(left).to_dict() == left


def test_things_result_round_trips():
    data = _event(
        type="things",
        things={
            "deviceId": "t2c449c9d1",
            "type": "scenarioResult",
            "result": {
                "scenarioId": "dummy_scenario_id",
                "revision": 2,
                "startTime": 1547817845950,
                "endTime": 1547817845952,
                "resultCode": "success",
                "actionResults": [{"type": "binary", "data": "/w=="}, {"type": "void"}],
                "bleNotificationPayload": "AQ==",
                "errorReason": "",
            },
        },
    )
    event = Event.from_dict(data)
    assert event.things.result.result_code is ThingsResultCode.SUCCESS
    assert event.things.result.action_results[0].data == b"/w=="
    assert event.things.result.ble_notification_payload == b"AQ=="
    expected = dict(data)
    expected["things"] = dict(data["things"])
    expected["things"]["result"] = dict(data["things"]["result"])
    del expected["things"]["result"]["errorReason"]
    assert event.to_dict() == expected


def test_things_link_without_result():
    data = _event(type="things", things={"deviceId": "t2c449c9d1", "type": "link"})
    event = Event.from_dict(data)
    assert event.things == Things(device_id="t2c449c9d1", type="link")
    assert event.to_dict() == data


def test_things_event_without_things_cannot_serialise():
    with pytest.raises(ValueError):
        Event(type=EventType.THINGS).to_dict()


def test_unsend_and_video_play_complete():
    unsend = _event(type="unsend", unsend={"messageId": "325708"})
    assert Event.from_dict(unsend).unsend.message_id == "325708"
    assert Event.from_dict(unsend).to_dict() == unsend
    video = _event(type="videoPlayComplete", videoPlayComplete={"trackingId": "track_id"})
    assert Event.from_dict(video).video_play_complete.tracking_id == "track_id"
    assert Event.from_dict(video).to_dict() == video


def test_follow_event_without_reply_token_omits_it():
    data = {"type": "unfollow", "mode": "active", "timestamp": STAMP, "source": SOURCE}
    event = Event.from_dict(data)
    assert event.type is EventType.UNFOLLOW
    assert event.to_dict() == data


def test_missing_mode_and_source_are_serialised_empty():
    out = Event(type=EventType.FOLLOW).to_dict()
    assert out["mode"] == ""
    assert out["source"] is None
    assert out["timestamp"] == 0


def test_naive_timestamp_is_taken_as_utc():
    aware = datetime(2020, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
    naive = aware.replace(tzinfo=None)
    assert Event(type="follow", timestamp=naive).to_dict()["timestamp"] == (
        Event(type="follow", timestamp=aware).to_dict()["timestamp"]
    )


def test_json_round_trip():
    event = Event(
        reply_token="reply",
        type=EventType.MESSAGE,
        mode=EventMode.STANDBY,
        timestamp=datetime(2021, 5, 6, 7, 8, 9, 123000, tzinfo=timezone.utc),
        source=EventSource(type=EventSourceType.GROUP, group_id="G1", user_id="U1"),
        message=TextMessage(id="42", text="こんにちは"),
    )
    assert Event.from_json(event.to_json()) == event
    assert Event.from_json(event.to_json().encode("utf-8")) == event


def test_event_source_omits_empty_ids():
    assert EventSource(type=EventSourceType.ROOM, room_id="R1").to_dict() == {
        "type": "room",
        "roomId": "R1",
    }
    assert EventSource.from_dict({"type": "room", "roomId": "R1"}).room_id == "R1"


def test_params_omit_empty():
    assert Params().to_dict() == {}
    params = Params(new_rich_menu_alias_id="richmenu-alias-b", status="SUCCESS")
    assert Params.from_dict(params.to_dict()) == params


def test_wrong_field_type_raises():
    with pytest.raises(TypeError):
        Event.from_dict(_event(timestamp="now", message={"id": "1", "type": "image"}))