"""Webhook events delivered by the messaging platform."""

from __future__ import annotations

import binascii
import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, ClassVar, TypeVar, Union

from .emoji import Emoji

_E = TypeVar("_E", bound=Enum)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


class EventType(str, Enum):
    """Kinds of webhook events."""

    MESSAGE = "message"
    FOLLOW = "follow"
    UNFOLLOW = "unfollow"
    JOIN = "join"
    LEAVE = "leave"
    MEMBER_JOINED = "memberJoined"
    MEMBER_LEFT = "memberLeft"
    POSTBACK = "postback"
    BEACON = "beacon"
    ACCOUNT_LINK = "accountLink"
    THINGS = "things"
    UNSEND = "unsend"
    VIDEO_PLAY_COMPLETE = "videoPlayComplete"


class EventMode(str, Enum):
    """Channel state when the event was sent."""

    ACTIVE = "active"
    STANDBY = "standby"


class EventSourceType(str, Enum):
    """Kinds of chat an event comes from."""

    USER = "user"
    GROUP = "group"
    ROOM = "room"


class BeaconEventType(str, Enum):
    """Kinds of beacon events."""

    ENTER = "enter"
    LEAVE = "leave"
    BANNER = "banner"
    STAY = "stay"


class AccountLinkResult(str, Enum):
    """Outcome of an account link."""

    OK = "ok"
    FAILED = "failed"


class ThingsResultCode(str, Enum):
    """Outcome of a scenario run on a device."""

    SUCCESS = "success"
    GATT_ERROR = "gatt_error"
    RUNTIME_ERROR = "runtime_error"


class ThingsActionResultType(str, Enum):
    """Kinds of action results of a scenario."""

    BINARY = "binary"
    VOID = "void"


class StickerResourceType(str, Enum):
    """Kinds of sticker resources."""

    STATIC = "STATIC"
    ANIMATION = "ANIMATION"
    SOUND = "SOUND"
    ANIMATION_SOUND = "ANIMATION_SOUND"
    PER_STICKER_TEXT = "PER_STICKER_TEXT"
    POPUP = "POPUP"
    POPUP_SOUND = "POPUP_SOUND"
    NAME_TEXT = "NAME_TEXT"


class MessageType(str, Enum):
    """Kinds of messages a message event may carry."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"
    LOCATION = "location"
    STICKER = "sticker"


def _wire(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _put(target: dict[str, Any], key: str, value: Any) -> None:
    value = _wire(value)
    if value:
        target[key] = value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"event field {key!r} must be a string")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"event field {key!r} must be an integer")
    return value


def _float(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"event field {key!r} must be a number")
    return float(value)


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"event field {key!r} must be an array")
    return value


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a JSON object")
    return data


def _optional_mapping(data: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    return _mapping(value, f"event field {key!r}")


def _enum(enum_cls: type[_E], data: Mapping[str, Any], key: str) -> _E | str:
    value = _str(data, key)
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _required(data: Mapping[str, Any], key: str, event_type: str) -> Mapping[str, Any]:
    value = _optional_mapping(data, key)
    if value is None:
        raise ValueError(f"{event_type} event has no {key!r} object")
    return value


@dataclass
class EventSource:
    """The user, group or room an event comes from."""

    type: EventSourceType | str = ""
    user_id: str = ""
    group_id: str = ""
    room_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": _wire(self.type)}
        _put(result, "userId", self.user_id)
        _put(result, "groupId", self.group_id)
        _put(result, "roomId", self.room_id)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EventSource:
        data = _mapping(data, "event source")
        return cls(
            type=_enum(EventSourceType, data, "type"),
            user_id=_str(data, "userId"),
            group_id=_str(data, "groupId"),
            room_id=_str(data, "roomId"),
        )


@dataclass
class Params:
    """Values chosen in a datetime picker or rich menu switch."""

    date: str = ""
    time: str = ""
    datetime: str = ""
    new_rich_menu_alias_id: str = ""
    status: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        _put(result, "date", self.date)
        _put(result, "time", self.time)
        _put(result, "datetime", self.datetime)
        _put(result, "newRichMenuAliasId", self.new_rich_menu_alias_id)
        _put(result, "status", self.status)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Params:
        data = _mapping(data, "postback params")
        return cls(
            date=_str(data, "date"),
            time=_str(data, "time"),
            datetime=_str(data, "datetime"),
            new_rich_menu_alias_id=_str(data, "newRichMenuAliasId"),
            status=_str(data, "status"),
        )


@dataclass
class Postback:
    """Data returned by a postback action."""

    data: str = ""
    params: Params | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"data": self.data}
        if self.params is not None:
            result["params"] = self.params.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Postback:
        data = _mapping(data, "postback")
        params = data.get("params")
        return cls(
            data=_str(data, "data"),
            params=None if params is None else Params.from_dict(params),
        )


@dataclass
class Beacon:
    """A beacon detection."""

    hwid: str = ""
    type: BeaconEventType | str = ""
    device_message: bytes = b""


@dataclass
class AccountLink:
    """The outcome of linking a user account."""

    result: AccountLinkResult | str = ""
    nonce: str = ""


@dataclass
class ThingsActionResult:
    """The result of one action of a scenario."""

    type: ThingsActionResultType | str = ""
    data: bytes = b""


@dataclass
class ThingsResult:
    """The result of a scenario run on a device."""

    scenario_id: str = ""
    revision: int = 0
    start_time: int = 0
    end_time: int = 0
    result_code: ThingsResultCode | str = ""
    action_results: list[ThingsActionResult] = field(default_factory=list)
    ble_notification_payload: bytes = b""
    error_reason: str = ""


@dataclass
class Things:
    """A device link, unlink or scenario result."""

    device_id: str = ""
    type: str = ""
    result: ThingsResult | None = None


@dataclass
class Unsend:
    """A message the user took back."""

    message_id: str = ""


@dataclass
class VideoPlayComplete:
    """A video the user watched to the end."""

    tracking_id: str = ""


@dataclass
class TextMessage:
    """A text message sent by a user."""

    message_type: ClassVar[MessageType] = MessageType.TEXT

    id: str = ""
    text: str = ""
    emojis: list[Emoji] = field(default_factory=list)
    mention: dict[str, Any] | None = None

    def _fields(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        _put(result, "text", self.text)
        if self.emojis:
            result["emojis"] = [e.to_dict() for e in self.emojis]
        if self.mention:
            result["mention"] = self.mention
        return result

    @classmethod
    def _parse(cls, data: Mapping[str, Any]) -> TextMessage:
        mention = _optional_mapping(data, "mention")
        return cls(
            id=_str(data, "id"),
            text=_str(data, "text"),
            emojis=[Emoji.from_dict(e) for e in _list(data, "emojis")],
            mention=None if mention is None else dict(mention),
        )


@dataclass
class ImageMessage:
    """An image sent by a user."""

    message_type: ClassVar[MessageType] = MessageType.IMAGE

    id: str = ""

    def _fields(self) -> dict[str, Any]:
        return {}

    @classmethod
    def _parse(cls, data: Mapping[str, Any]) -> ImageMessage:
        return cls(id=_str(data, "id"))


@dataclass
class VideoMessage:
    """A video sent by a user."""

    message_type: ClassVar[MessageType] = MessageType.VIDEO

    id: str = ""

    def _fields(self) -> dict[str, Any]:
        return {}

    @classmethod
    def _parse(cls, data: Mapping[str, Any]) -> VideoMessage:
        return cls(id=_str(data, "id"))


@dataclass
class AudioMessage:
    """An audio clip sent by a user."""

    message_type: ClassVar[MessageType] = MessageType.AUDIO

    id: str = ""
    duration: int = 0

    def _fields(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        _put(result, "duration", self.duration)
        return result

    @classmethod
    def _parse(cls, data: Mapping[str, Any]) -> AudioMessage:
        return cls(id=_str(data, "id"), duration=_int(data, "duration"))


@dataclass
class FileMessage:
    """A file sent by a user."""

    message_type: ClassVar[MessageType] = MessageType.FILE

    id: str = ""
    file_name: str = ""
    file_size: int = 0

    def _fields(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        _put(result, "fileName", self.file_name)
        _put(result, "fileSize", self.file_size)
        return result

    @classmethod
    def _parse(cls, data: Mapping[str, Any]) -> FileMessage:
        return cls(
            id=_str(data, "id"),
            file_name=_str(data, "fileName"),
            file_size=_int(data, "fileSize"),
        )


@dataclass
class LocationMessage:
    """A location sent by a user."""

    message_type: ClassVar[MessageType] = MessageType.LOCATION

    id: str = ""
    title: str = ""
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    def _fields(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        _put(result, "title", self.title)
        _put(result, "address", self.address)
        _put(result, "latitude", self.latitude)
        _put(result, "longitude", self.longitude)
        return result

    @classmethod
    def _parse(cls, data: Mapping[str, Any]) -> LocationMessage:
        return cls(
            id=_str(data, "id"),
            title=_str(data, "title"),
            address=_str(data, "address"),
            latitude=_float(data, "latitude"),
            longitude=_float(data, "longitude"),
        )


@dataclass
class StickerMessage:
    """A sticker sent by a user."""

    message_type: ClassVar[MessageType] = MessageType.STICKER

    id: str = ""
    package_id: str = ""
    sticker_id: str = ""
    sticker_resource_type: StickerResourceType | str = ""
    keywords: list[str] = field(default_factory=list)

    def _fields(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        _put(result, "packageId", self.package_id)
        _put(result, "stickerId", self.sticker_id)
        _put(result, "stickerResourceType", self.sticker_resource_type)
        if self.keywords:
            result["keywords"] = list(self.keywords)
        return result

    @classmethod
    def _parse(cls, data: Mapping[str, Any]) -> StickerMessage:
        keywords = _list(data, "keywords")
        if not all(isinstance(k, str) for k in keywords):
            raise TypeError("event field 'keywords' must hold strings")
        return cls(
            id=_str(data, "id"),
            package_id=_str(data, "packageId"),
            sticker_id=_str(data, "stickerId"),
            sticker_resource_type=_enum(StickerResourceType, data, "stickerResourceType"),
            keywords=list(keywords),
        )


_Message = Union[
    TextMessage,
    ImageMessage,
    VideoMessage,
    AudioMessage,
    FileMessage,
    LocationMessage,
    StickerMessage,
]

_MESSAGE_PARSERS: dict[str, Callable[[Mapping[str, Any]], _Message]] = {
    cls.message_type.value: cls._parse
    for cls in (
        TextMessage,
        ImageMessage,
        VideoMessage,
        AudioMessage,
        FileMessage,
        LocationMessage,
        StickerMessage,
    )
}


def _message_to_dict(message: _Message) -> dict[str, Any]:
    return {"id": message.id, "type": message.message_type.value, **message._fields()}


def _bytes_to_text(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


def _things_to_dict(things: Things) -> dict[str, Any]:
    result: dict[str, Any] = {"deviceId": things.device_id, "type": things.type}
    if things.result is not None:
        res = things.result
        raw: dict[str, Any] = {
            "scenarioId": res.scenario_id,
            "revision": res.revision,
            "startTime": res.start_time,
            "endTime": res.end_time,
            "resultCode": _wire(res.result_code),
            "actionResults": [],
        }
        for action in res.action_results:
            item: dict[str, Any] = {}
            _put(item, "type", action.type)
            _put(item, "data", _bytes_to_text(action.data))
            raw["actionResults"].append(item)
        _put(raw, "bleNotificationPayload", _bytes_to_text(res.ble_notification_payload))
        _put(raw, "errorReason", res.error_reason)
        result["result"] = raw
    return result


def _things_from_dict(data: Mapping[str, Any]) -> Things:
    things = Things(device_id=_str(data, "deviceId"), type=_str(data, "type"))
    raw = _optional_mapping(data, "result")
    if raw is not None:
        actions = [_mapping(a, "things action result") for a in _list(raw, "actionResults")]
        things.result = ThingsResult(
            scenario_id=_str(raw, "scenarioId"),
            revision=_int(raw, "revision"),
            start_time=_int(raw, "startTime"),
            end_time=_int(raw, "endTime"),
            result_code=_enum(ThingsResultCode, raw, "resultCode"),
            action_results=[
                ThingsActionResult(
                    type=_enum(ThingsActionResultType, a, "type"),
                    data=_str(a, "data").encode("utf-8"),
                )
                for a in actions
            ],
            ble_notification_payload=_str(raw, "bleNotificationPayload").encode("utf-8"),
            error_reason=_str(raw, "errorReason"),
        )
    return things


def _members(data: Mapping[str, Any]) -> list[EventSource]:
    return [EventSource.from_dict(m) for m in _list(data, "members")]


@dataclass
class Event:
    """A single webhook event."""

    reply_token: str = ""
    type: EventType | str = ""
    mode: EventMode | str = ""
    timestamp: datetime = _EPOCH
    source: EventSource | None = None
    message: _Message | None = None
    postback: Postback | None = None
    beacon: Beacon | None = None
    account_link: AccountLink | None = None
    things: Things | None = None
    members: list[EventSource] = field(default_factory=list)
    unsend: Unsend | None = None
    video_play_complete: VideoPlayComplete | None = None

    def _timestamp_millis(self) -> int:
        stamp = self.timestamp
        if stamp.tzinfo is None:
            stamp = stamp.replace(tzinfo=timezone.utc)
        return (stamp - _EPOCH) // _MILLISECOND

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        _put(result, "replyToken", self.reply_token)
        result["type"] = _wire(self.type)
        result["mode"] = _wire(self.mode)
        result["timestamp"] = self._timestamp_millis()
        result["source"] = None if self.source is None else self.source.to_dict()
        if self.message is not None:
            result["message"] = _message_to_dict(self.message)
        if self.postback is not None:
            result["postback"] = self.postback.to_dict()
        if self.beacon is not None:
            beacon: dict[str, Any] = {"hwid": self.beacon.hwid, "type": _wire(self.beacon.type)}
            _put(beacon, "dm", self.beacon.device_message.hex())
            result["beacon"] = beacon
        if self.account_link is not None:
            result["link"] = {
                "result": _wire(self.account_link.result),
                "nonce": self.account_link.nonce,
            }
        if self.type == EventType.MEMBER_JOINED:
            result["joined"] = {"members": [m.to_dict() for m in self.members]}
        elif self.type == EventType.MEMBER_LEFT:
            result["left"] = {"members": [m.to_dict() for m in self.members]}
        elif self.type == EventType.THINGS:
            if self.things is None:
                raise ValueError("things event has no things data")
            result["things"] = _things_to_dict(self.things)
        if self.unsend is not None:
            result["unsend"] = {"messageId": self.unsend.message_id}
        if self.video_play_complete is not None:
            result["videoPlayComplete"] = {"trackingId": self.video_play_complete.tracking_id}
        return result

    def to_json(self) -> str:
        """Return the compact JSON text for this event."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Event:
        data = _mapping(data, "event")
        source = data.get("source")
        event = cls(
            reply_token=_str(data, "replyToken"),
            type=_enum(EventType, data, "type"),
            mode=_enum(EventMode, data, "mode"),
            timestamp=_EPOCH + timedelta(milliseconds=_int(data, "timestamp")),
            source=None if source is None else EventSource.from_dict(source),
        )
        kind = event.type
        if kind == EventType.MESSAGE:
            raw = _required(data, "message", "message")
            message_type = raw.get("type")
            parser = _MESSAGE_PARSERS.get(message_type) if isinstance(message_type, str) else None
            if parser is not None:
                event.message = parser(raw)
        elif kind == EventType.POSTBACK:
            raw_postback = _optional_mapping(data, "postback")
            if raw_postback is not None:
                event.postback = Postback.from_dict(raw_postback)
        elif kind == EventType.BEACON:
            raw = _required(data, "beacon", "beacon")
            try:
                device_message = binascii.unhexlify(_str(raw, "dm"))
            except binascii.Error as exc:
                raise ValueError(f"invalid beacon device message: {exc}") from exc
            event.beacon = Beacon(
                hwid=_str(raw, "hwid"),
                type=_enum(BeaconEventType, raw, "type"),
                device_message=device_message,
            )
        elif kind == EventType.ACCOUNT_LINK:
            raw = _required(data, "link", "account link")
            event.account_link = AccountLink(
                result=_enum(AccountLinkResult, raw, "result"),
                nonce=_str(raw, "nonce"),
            )
        elif kind == EventType.MEMBER_JOINED:
            event.members = _members(_required(data, "joined", "member joined"))
        elif kind == EventType.MEMBER_LEFT:
            event.members = _members(_required(data, "left", "member left"))
        elif kind == EventType.THINGS:
            event.things = _things_from_dict(_required(data, "things", "things"))
        elif kind == EventType.UNSEND:
            raw_unsend = _optional_mapping(data, "unsend")
            if raw_unsend is not None:
                event.unsend = Unsend(message_id=_str(raw_unsend, "messageId"))
        elif kind == EventType.VIDEO_PLAY_COMPLETE:
            raw_video = _optional_mapping(data, "videoPlayComplete")
            if raw_video is not None:
                event.video_play_complete = VideoPlayComplete(
                    tracking_id=_str(raw_video, "trackingId")
                )
        return event

    @classmethod
    def from_json(cls, body: str | bytes | bytearray) -> Event:
        """Parse the JSON text of one event."""
        return cls.from_dict(json.loads(body))