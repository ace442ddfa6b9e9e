"""Data model of the events and requests exchanged with the collection host."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

Properties = list[tuple[str, str]]


class Consent(enum.Enum):
    """Consent state attached to an event."""

    PENDING = "pending"
    GRANTED = "granted"
    DENIED = "denied"


class EventType(enum.Enum):
    """Kind of an incoming event."""

    PAGE = "page"
    TRACK = "track"
    USER = "user"


class HttpMethod(enum.Enum):
    """HTTP method of an outgoing request."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


@dataclass
class Client:
    """Information about the client that produced an event."""

    city: str = ""
    ip: str = ""
    locale: str = ""
    timezone: str = ""
    user_agent: str = ""
    user_agent_architecture: str = ""
    user_agent_bitness: str = ""
    user_agent_full_version_list: str = ""
    user_agent_version_list: str = ""
    user_agent_mobile: str = ""
    user_agent_model: str = ""
    os_name: str = ""
    os_version: str = ""
    screen_width: int = 0
    screen_height: int = 0
    screen_density: float = 0.0
    continent: str = ""
    country_code: str = ""
    country_name: str = ""
    region: str = ""


@dataclass
class Campaign:
    """Marketing campaign attribution."""

    name: str = ""
    source: str = ""
    medium: str = ""
    term: str = ""
    content: str = ""
    creative_format: str = ""
    marketing_tactic: str = ""


@dataclass
class Session:
    """Browsing session details."""

    session_id: str = ""
    previous_session_id: str = ""
    session_count: int = 0
    session_start: bool = False
    first_seen: int = 0
    last_seen: int = 0


@dataclass
class PageData:
    """Data of a page view."""

    name: str = ""
    category: str = ""
    keywords: list[str] = field(default_factory=list)
    title: str = ""
    url: str = ""
    path: str = ""
    search: str = ""
    referrer: str = ""
    properties: Properties = field(default_factory=list)


@dataclass
class TrackData:
    """Data of a custom tracked action."""

    name: str = ""
    products: list[Properties] = field(default_factory=list)
    properties: Properties = field(default_factory=list)


@dataclass
class UserData:
    """Identity data of a user."""

    user_id: str = ""
    anonymous_id: str = ""
    edgee_id: str = ""
    properties: Properties = field(default_factory=list)


@dataclass
class Context:
    """Everything known about the circumstances of an event."""

    page: PageData = field(default_factory=PageData)
    user: UserData = field(default_factory=UserData)
    client: Client = field(default_factory=Client)
    campaign: Campaign = field(default_factory=Campaign)
    session: Session = field(default_factory=Session)


@dataclass
class Event:
    """An incoming event with its payload and context."""

    uuid: str = ""
    timestamp: int = 0
    timestamp_millis: int = 0
    timestamp_micros: int = 0
    event_type: EventType = EventType.PAGE
    data: Union[PageData, TrackData, UserData] = field(default_factory=PageData)
    context: Context = field(default_factory=Context)
    consent: Optional[Consent] = None


@dataclass
class EdgeeRequest:
    """An outgoing HTTP request to be performed by the host."""

    method: HttpMethod
    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    forward_client_headers: bool = False
    body: str = ""