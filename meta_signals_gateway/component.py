"""Entry points that turn collected events into conversions API requests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Union

from .events import EdgeeRequest, Event, HttpMethod, PageData, TrackData, UserData
from .payload import JsonValue, MetaEvent, MetaPayload, SettingsError, parse_value

Settings = Union[Mapping[str, str], Iterable[tuple[str, str]]]

_DOMAINS = {
    "EU": "sgw-eu.edgee.app",
    "US": "sgw-us.edgee.app",
}
_DEFAULT_DOMAIN = "sgw-eu.edgee.app"


class ComponentError(Exception):
    """Raised when an event cannot be turned into a request."""


def _payload_for(settings: Settings) -> MetaPayload:
    try:
        payload = MetaPayload.from_settings(settings)
    except SettingsError as exc:
        raise ComponentError(str(exc)) from exc
    if payload.data_collection_method != "edge":
        raise ComponentError("Data collection method is not supported")
    return payload


def _properties_to_custom_data(
    properties: Iterable[tuple[str, str]],
) -> dict[str, JsonValue]:
    return {key: parse_value(value) for key, value in properties}


def page(event: Event, settings: Settings) -> EdgeeRequest:
    """Build the request for a page view event."""
    data = event.data
    if not isinstance(data, PageData):
        raise ComponentError("Missing page data")

    payload = _payload_for(settings)
    meta_event = MetaEvent.from_event(event, "PageView")

    custom_data: dict[str, JsonValue] = {}
    for key, value in (
        ("page_name", data.name),
        ("page_category", data.category),
        ("page_title", data.title),
    ):
        if value:
            custom_data[key] = parse_value(value)
    custom_data.update(_properties_to_custom_data(data.properties))

    meta_event.custom_data = custom_data
    payload.data.append(meta_event)
    return build_request(payload)


def track(event: Event, settings: Settings) -> EdgeeRequest:
    """Build the request for a tracked action event."""
    data = event.data
    if not isinstance(data, TrackData):
        raise ComponentError("Missing track data")
    if not data.name:
        raise ComponentError("Track name is not set")

    payload = _payload_for(settings)
    meta_event = MetaEvent.from_event(event, data.name)
    meta_event.custom_data = _properties_to_custom_data(data.properties)
    payload.data.append(meta_event)
    return build_request(payload)


def user(event: Event, settings: Settings) -> EdgeeRequest:
    """Build the request for a user identification event."""
    data = event.data
    if not isinstance(data, UserData):
        raise ComponentError("Missing user data")
    if not data.user_id and not data.anonymous_id:
        raise ComponentError("user_id or anonymous_id is not set")

    payload = _payload_for(settings)
    payload.data.append(MetaEvent.from_event(event, "Lead"))
    return build_request(payload)


def build_request(payload: MetaPayload) -> EdgeeRequest:
    """Wrap a payload into the POST request sent to the signals gateway."""
    domain = _DOMAINS.get(payload.servers_location, _DEFAULT_DOMAIN)
    return EdgeeRequest(
        method=HttpMethod.POST,
        url=f"https://{domain}/capi/{payload.pixel_id}/events",
        headers=[("content-type", "application/json")],
        forward_client_headers=True,
        body=payload.to_json(),
    )