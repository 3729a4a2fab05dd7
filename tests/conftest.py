"""Shared fixtures for snoo tests."""

from unittest.mock import Mock

import pytest

from snoo.utils.reddit_client import RedditClient


def thing(kind, **data):
    return {"kind": kind, "data": data}


def listing(*children):
    return {
        "kind": "Listing",
        "data": {"dist": len(children), "children": list(children), "after": None, "before": None},
    }


@pytest.fixture
def client():
    """A transport double; tests set get/post_form return values."""
    fake = Mock(spec=RedditClient)
    fake.get.return_value = listing()
    fake.post_form.return_value = {}
    return fake
