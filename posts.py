from enum import Enum

UNTITLED_DATABASE = "Untitled Database"

# The widget's database MUST have these property names.
HEADLINE_PROPERTY = "Headline"
MEDIA_PROPERTY = "Media"
CAPTION_PROPERTY = "Caption"
DATE_PROPERTY = "Scheduled Date"


class PropertyKind(Enum):
    TITLE = "title"
    RICH_TEXT = "rich_text"
    URL = "url"
    DATE = "date"


def get_prop(properties: dict, name: str, kind: PropertyKind):
    """Unwrap a Notion page property to a plain value.

    Returns None when the property is absent. Text kinds return the first
    fragment's plain text, or "" when there is no text.
    """
    prop = properties.get(name)
    if not prop:
        return None
    if kind in (PropertyKind.TITLE, PropertyKind.RICH_TEXT):
        fragments = prop[kind.value]
        return (fragments[0].get("plain_text") if fragments else None) or ""
    if kind is PropertyKind.URL:
        return prop.get("url")
    if kind is PropertyKind.DATE:
        date = prop.get("date")
        return date.get("start") if date else None
    return None


def split_media(value: str) -> list:
    """Comma-separated URLs -> trimmed list, empty segments dropped."""
    return [u.strip() for u in (value or "").split(",") if u.strip()]


def database_summary(db: dict) -> dict:
    title = db.get("title") or []
    return {
        "id": db["id"],
        "title": (title[0].get("plain_text") if title else None) or UNTITLED_DATABASE
    }


def post_record(page: dict) -> dict:
    properties = page.get("properties") or {}
    return {
        "id": page["id"],
        "headline": get_prop(properties, HEADLINE_PROPERTY, PropertyKind.TITLE),
        "media": split_media(get_prop(properties, MEDIA_PROPERTY, PropertyKind.URL)),
        "caption": get_prop(properties, CAPTION_PROPERTY, PropertyKind.RICH_TEXT),
        "date": get_prop(properties, DATE_PROPERTY, PropertyKind.DATE)
    }


def date_update(new_date: str) -> dict:
    """Properties payload that sets the scheduled date (start only)."""
    return {DATE_PROPERTY: {"date": {"start": new_date}}}
