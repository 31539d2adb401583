import pytest

import main


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    with main.app.test_client() as client:
        yield client


def rich_text(text):
    return [{"type": "text", "plain_text": text}] if text is not None else []


def make_page(page_id="page-1", headline="Launch", media="http://a", caption="Hello", date="2024-05-01"):
    properties = {
        "Headline": {"type": "title", "title": rich_text(headline)},
        "Media": {"type": "url", "url": media},
        "Caption": {"type": "rich_text", "rich_text": rich_text(caption)},
        "Scheduled Date": {"type": "date", "date": {"start": date, "end": None} if date else None},
    }
    return {"object": "page", "id": page_id, "properties": properties}
