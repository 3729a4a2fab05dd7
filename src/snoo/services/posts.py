"""Submitting and managing posts"""

from dataclasses import dataclass, fields
from typing import Optional

from loguru import logger

from ..errors import InvalidArgumentError, InvalidOptionsError, SubmissionError
from ..utils.reddit_client import RedditClient


@dataclass(frozen=True)
class Submitted:
    """A newly submitted post"""
    id: str = ""
    full_id: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Submitted":
        return cls(
            id=data.get("id") or "",
            full_id=data.get("name") or "",
            url=data.get("url") or "",
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "full_id": self.full_id, "url": self.url}


# Attribute name -> form field name, in form order
SELF_FORM_FIELDS = {
    "subreddit": "sr",
    "title": "title",
    "text": "text",
    "flair_id": "flair_id",
    "flair_text": "flair_text",
    "send_replies": "sendreplies",
    "nsfw": "nsfw",
    "spoiler": "spoiler",
}

URL_FORM_FIELDS = {
    "subreddit": "sr",
    "title": "title",
    "url": "url",
    "flair_id": "flair_id",
    "flair_text": "flair_text",
    "send_replies": "sendreplies",
    "resubmit": "resubmit",
    "nsfw": "nsfw",
    "spoiler": "spoiler",
}


@dataclass
class SubmitSelfOptions:
    """Options for a self text post"""
    subreddit: str = ""
    title: str = ""
    text: str = ""

    flair_id: str = ""
    flair_text: str = ""

    send_replies: Optional[bool] = None
    nsfw: bool = False
    spoiler: bool = False

    def to_form(self) -> dict:
        return _encode_options(self, SELF_FORM_FIELDS)


@dataclass
class SubmitURLOptions:
    """Options for a link post"""
    subreddit: str = ""
    title: str = ""
    url: str = ""

    flair_id: str = ""
    flair_text: str = ""

    send_replies: Optional[bool] = None
    resubmit: bool = False
    nsfw: bool = False
    spoiler: bool = False

    def to_form(self) -> dict:
        return _encode_options(self, URL_FORM_FIELDS)


def _encode_options(opts, form_fields: dict) -> dict:
    """Encode submit options as form fields.

    Empty strings and False flags are left out. ``send_replies`` is
    tri-state: None leaves it out, otherwise it is sent as 'true'/'false'.
    """
    form = {}
    for f in fields(opts):
        value = getattr(opts, f.name)
        key = form_fields[f.name]

        if f.name == "send_replies":
            if value is None:
                continue
            if not isinstance(value, bool):
                raise InvalidOptionsError(f"{f.name} must be a bool or None, got {value!r}")
            form[key] = "true" if value else "false"
        elif f.type is bool:
            if not isinstance(value, bool):
                raise InvalidOptionsError(f"{f.name} must be a bool, got {value!r}")
            if value:
                form[key] = "true"
        else:
            if value is None:
                continue
            if not isinstance(value, str):
                raise InvalidOptionsError(f"{f.name} must be a string, got {value!r}")
            if value:
                form[key] = value
    return form


def _submission_errors(envelope: dict) -> list:
    errors = []
    for err in envelope.get("errors") or []:
        err = list(err) + ["", "", ""]
        errors.append((err[0] or "", err[1] or "", err[2] or ""))
    return errors


class PostService:
    """Post related endpoints of the Reddit API."""

    def __init__(self, client: RedditClient):
        self.client = client

    def submit_self(self, opts: SubmitSelfOptions) -> Optional[Submitted]:
        """Submit a self text post."""
        if not isinstance(opts, SubmitSelfOptions):
            raise InvalidOptionsError(f"expected SubmitSelfOptions, got {type(opts).__name__}")
        return self._submit(opts.to_form(), "self")

    def submit_url(self, opts: SubmitURLOptions) -> Optional[Submitted]:
        """Submit a link post."""
        if not isinstance(opts, SubmitURLOptions):
            raise InvalidOptionsError(f"expected SubmitURLOptions, got {type(opts).__name__}")
        return self._submit(opts.to_form(), "link")

    def _submit(self, form: dict, kind: str) -> Optional[Submitted]:
        form["kind"] = kind
        form["api_type"] = "json"

        root = self.client.post_form("api/submit", form) or {}
        envelope = root.get("json") or {}

        errors = _submission_errors(envelope)
        if errors:
            raise SubmissionError(errors)

        data = envelope.get("data")
        if data is None:
            return None

        submitted = Submitted.from_dict(data)
        logger.info("Submitted {} post {} to r/{}", kind, submitted.full_id, form.get("sr", ""))
        return submitted

    def enable_replies(self, id: str) -> None:
        """Enable inbox replies for a thing created by the client."""
        self._post_id("api/sendreplies", id, state="true")

    def disable_replies(self, id: str) -> None:
        """Disable inbox replies for a thing created by the client."""
        self._post_id("api/sendreplies", id, state="false")

    def mark_nsfw(self, id: str) -> None:
        """Mark a post as NSFW."""
        self._post_id("api/marknsfw", id)

    def unmark_nsfw(self, id: str) -> None:
        """Unmark a post as NSFW."""
        self._post_id("api/unmarknsfw", id)

    def spoiler(self, id: str) -> None:
        """Mark a post as a spoiler."""
        self._post_id("api/spoiler", id)

    def unspoiler(self, id: str) -> None:
        """Unmark a post as a spoiler."""
        self._post_id("api/unspoiler", id)

    def hide(self, *ids: str) -> None:
        """Hide links with the given fullnames.

        Raises:
            InvalidArgumentError: if no IDs are given
        """
        self._post_ids("api/hide", ids)

    def unhide(self, *ids: str) -> None:
        """Unhide links with the given fullnames.

        Raises:
            InvalidArgumentError: if no IDs are given
        """
        self._post_ids("api/unhide", ids)

    def _post_id(self, path: str, id: str, **extra: str) -> None:
        form = {"id": id, **extra}
        self.client.post_form(path, form)

    def _post_ids(self, path: str, ids: tuple) -> None:
        if not ids:
            raise InvalidArgumentError("must provide at least 1 id")
        self.client.post_form(path, {"id": ",".join(ids)})
