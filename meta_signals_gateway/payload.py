"""Conversion of incoming events into the conversions API payload."""

from __future__ import annotations

import hashlib
import json
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .events import Event, UserData

JsonValue = Union[bool, int, float, str]

_JSON_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_INT_MIN = -(2**63)
_UINT_MAX = 2**64 - 1


class SettingsError(ValueError):
    """Raised when a required setting is missing."""


def parse_value(value: str) -> JsonValue:
    """Turn a property string into a boolean, number or string."""
    if value == "true":
        return True
    if value == "false":
        return False
    if _JSON_NUMBER.fullmatch(value):
        if any(ch in value for ch in ".eE"):
            return float(value)
        number = int(value)
        if _INT_MIN <= number <= _UINT_MAX:
            return number
        return float(value)
    return value


def hash_value(value: str) -> str:
    """Return the lower-case hex SHA-256 digest of a string."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


_HASHED_PROPERTIES = {
    "email": "email",
    "phone_number": "phone_number",
    "first_name": "first_name",
    "last_name": "last_name",
    "gender": "gender",
    "date_of_birth": "date_of_birth",
    "city": "city",
    "state": "state",
    "zip_code": "zip_code",
    "country": "country",
}

_USER_DATA_KEYS = (
    ("email", "em"),
    ("phone_number", "ph"),
    ("first_name", "fn"),
    ("last_name", "ln"),
    ("date_of_birth", "db"),
    ("gender", "ge"),
    ("city", "ct"),
    ("state", "st"),
    ("zip_code", "zp"),
    ("country", "country"),
    ("external_id", "external_id"),
    ("client_ip_address", "client_ip_address"),
    ("client_user_agent", "client_user_agent"),
    ("fbc", "fbc"),
    ("fbp", "fbp"),
)


@dataclass
class MetaUserData:
    """Customer information sent with an event; personal fields are hashed."""

    email: Optional[str] = None
    phone_number: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    external_id: Optional[str] = None
    client_ip_address: Optional[str] = None
    client_user_agent: Optional[str] = None
    fbc: Optional[str] = None
    fbp: Optional[str] = None

    def to_dict(self) -> dict[str, str]:
        """Return the wire form, leaving out unset fields."""
        result = {}
        for attribute, key in _USER_DATA_KEYS:
            value = getattr(self, attribute)
            if value is not None:
                result[key] = value
        return result


@dataclass
class MetaEvent:
    """A single server event."""

    event_name: str
    event_time: int
    event_id: str
    user_data: MetaUserData = field(default_factory=MetaUserData)
    custom_data: Optional[dict[str, JsonValue]] = field(default_factory=dict)
    event_source_url: Optional[str] = None
    action_source: str = "website"
    referrer_url: Optional[str] = None

    @classmethod
    def from_event(cls, event: Event, event_name: str) -> "MetaEvent":
        """Build a server event from an incoming event."""
        page = event.context.page
        client = event.context.client

        user_data = MetaUserData(
            client_ip_address=client.ip,
            client_user_agent=client.user_agent,
        )
        if event.context.user.user_id:
            user_data.external_id = hash_value(event.context.user.user_id)

        if isinstance(event.data, UserData):
            properties = event.data.properties
        else:
            properties = event.context.user.properties
        for key, value in properties:
            attribute = _HASHED_PROPERTIES.get(key)
            if attribute is not None:
                setattr(user_data, attribute, hash_value(value))

        return cls(
            event_name=event_name,
            event_time=event.timestamp,
            event_id=event.uuid,
            user_data=user_data,
            event_source_url=f"{page.url}{page.search}" if page.url else None,
            referrer_url=page.referrer or None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form, leaving out unset optional fields."""
        result: dict[str, Any] = {
            "event_name": self.event_name,
            "event_time": self.event_time,
            "user_data": self.user_data.to_dict(),
        }
        if self.custom_data is not None:
            result["custom_data"] = dict(self.custom_data)
        if self.event_source_url is not None:
            result["event_source_url"] = self.event_source_url
        result["event_id"] = self.event_id
        result["action_source"] = self.action_source
        if self.referrer_url is not None:
            result["referrer_url"] = self.referrer_url
        return result


@dataclass
class MetaPayload:
    """A batch of server events together with the settings that route it."""

    servers_location: str
    pixel_id: str
    data_collection_method: str
    data: list[MetaEvent] = field(default_factory=list)

    @classmethod
    def from_settings(
        cls, settings: Union[Mapping[str, str], Iterable[tuple[str, str]]]
    ) -> "MetaPayload":
        """Create an empty payload from component settings."""
        values = dict(settings)
        required = (
            ("servers_location", "Missing Meta Servers Location"),
            ("pixel_id", "Missing Meta Pixel ID"),
            ("data_collection_method", "Missing Meta Data Collection Method"),
        )
        for key, message in required:
            if key not in values:
                raise SettingsError(message)
        return cls(
            servers_location=values["servers_location"],
            pixel_id=values["pixel_id"],
            data_collection_method=values["data_collection_method"],
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form; routing settings are not part of it."""
        return {"data": [event.to_dict() for event in self.data]}

    def to_json(self) -> str:
        """Serialize the payload as compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)