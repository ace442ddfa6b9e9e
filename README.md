# meta-signals-gateway

This package builds Meta Conversions API (CAPI) requests from analytics events. The
requests go to a signals gateway. Each page, track or user event becomes a ready-made
HTTP request, an `EdgeeRequest` with a method, a URL, headers and a JSON body.

## What it does not do

The package does not perform any network I/O. It only describes the request. You send
`request.method` to `request.url` with `request.headers` and `request.body` using any
HTTP client you like. It also does not read events from anywhere: you build the
`Event` objects yourself.

## Installation

```
pip install -e .
```

## Events

`meta_signals_gateway.events` holds the data model as plain dataclasses and enums:

- `Event` carries `uuid`, `timestamp`, `event_type`, `data`, `context` and `consent`.
- `data` is one of `PageData`, `TrackData` or `UserData`.
- `Context` groups `PageData`, `UserData`, `Client`, `Campaign` and `Session`.
- `Consent`, `EventType` and `HttpMethod` are enums.
- `EdgeeRequest` is the resulting request.

Every field has an empty default, so you only fill in what you have.

## Settings

Settings are either a mapping or a sequence of `(key, value)` string pairs. Three keys
are required:

| key                      | meaning                                                      |
|--------------------------|--------------------------------------------------------------|
| `servers_location`       | `EU` or `US` picks the gateway host; any other value uses `EU` |
| `pixel_id`               | your Meta pixel identifier                                   |
| `data_collection_method` | must be `edge`                                               |

## Usage

```python
from meta_signals_gateway.component import ComponentError, page, track, user
from meta_signals_gateway.events import Context, Event, PageData

settings = [
    ("servers_location", "EU"),
    ("pixel_id", "1234"),
    ("data_collection_method", "edge"),
]

page_data = PageData(name="home", url="https://example.com/", title="Home")
event = Event(uuid="event-1", timestamp=1700000000, data=page_data,
              context=Context(page=page_data))

try:
    request = page(event, settings)
except ComponentError as exc:
    print("rejected:", exc)
else:
    print(request.method, request.url)
    print(request.body)
```

There is one entry point for each kind of event:

- `page(event, settings)` sends a `PageView` event. The page name, category and title
  go into `custom_data` as `page_name`, `page_category` and `page_title` when they are
  not empty. The page properties go into `custom_data` as well.
- `track(event, settings)` sends an event named after the track name, with the track
  properties as `custom_data`. An empty track name is an error.
- `user(event, settings)` sends a `Lead` event. It needs a non-empty `user_id` or
  `anonymous_id`.

Each of them raises `ComponentError` in these cases:

- the event's `data` is of the wrong kind;
- a required setting is missing;
- `data_collection_method` is not `edge`;
- a check listed above fails.

Property values are typed before they are sent. `"true"` and `"false"` become
booleans, JSON-style numeric strings become integers or floats, and every other value
stays a string (see `meta_signals_gateway.payload.parse_value`).

Personal user fields are hashed to lower-case hex SHA-256 with `hash_value`. These
fields are email, phone number, first and last name, gender, date of birth, city,
state, zip code and country. For a user event they are taken from the event's own
`UserData` properties. For other events they come from the context's user. Other
property keys are ignored. A non-empty `user_id` is hashed the same way and sent as
`external_id`. The client IP and the user agent are passed through unchanged. The
page URL with its search string becomes `event_source_url`, and the referrer becomes
`referrer_url`.

Every request is a `POST` to `https://sgw-eu.edgee.app/capi/<pixel_id>/events` (or
`sgw-us` for `US`). It has a `content-type: application/json` header and
`forward_client_headers` set to true.

## Lower-level pieces

`meta_signals_gateway.payload` provides the building blocks:

- `MetaPayload.from_settings(settings)` reads the settings and raises `SettingsError`
  (a `ValueError`) when a required key is missing.
- `MetaEvent.from_event(event, event_name)` builds a single CAPI event.
- `MetaUserData`, `MetaEvent` and `MetaPayload` each have a `to_dict()` giving the wire
  form, in which unset optional fields are left out.
- `MetaPayload.to_json()` serializes the body as compact JSON.

`meta_signals_gateway.component.build_request(payload)` wraps a payload into an
`EdgeeRequest`.

## Running the tests

```
pip install -e ".[test]"
pytest
```