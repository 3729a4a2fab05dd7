"""Typed Reddit things and the kind-tagged listing decoder"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from loguru import logger

KIND_COMMENT = "t1"
KIND_LINK = "t3"
KIND_SUBREDDIT = "t5"


def _timestamp(value: Any) -> Optional[datetime]:
    """Convert a Unix timestamp to an aware datetime.

    Reddit sends ``false`` for ``edited`` on things that were never edited.
    """
    if value is None or isinstance(value, bool):
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)


def _to_dict(thing) -> dict:
    data = asdict(thing)
    for key, value in data.items():
        if isinstance(value, datetime):
            data[key] = value.isoformat()
    return data


@dataclass
class Comment:
    """A comment (kind t1)"""
    id: str = ""
    full_id: str = ""
    created: Optional[datetime] = None
    edited: Optional[datetime] = None

    parent_id: str = ""
    permalink: str = ""

    body: str = ""
    author: str = ""
    author_id: str = ""
    author_flair_text: str = ""

    subreddit_name: str = ""
    subreddit_name_prefixed: str = ""
    subreddit_id: str = ""

    score: int = 0
    controversiality: int = 0

    post_id: str = ""
    post_title: str = ""
    post_permalink: str = ""
    post_author: str = ""
    post_num_comments: int = 0

    is_submitter: bool = False
    score_hidden: bool = False
    saved: bool = False
    stickied: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Comment":
        return cls(
            id=data.get("id") or "",
            full_id=data.get("name") or "",
            created=_timestamp(data.get("created_utc")),
            edited=_timestamp(data.get("edited")),
            parent_id=data.get("parent_id") or "",
            permalink=data.get("permalink") or "",
            body=data.get("body") or "",
            author=data.get("author") or "",
            author_id=data.get("author_fullname") or "",
            author_flair_text=data.get("author_flair_text") or "",
            subreddit_name=data.get("subreddit") or "",
            subreddit_name_prefixed=data.get("subreddit_name_prefixed") or "",
            subreddit_id=data.get("subreddit_id") or "",
            score=data.get("score") or 0,
            controversiality=data.get("controversiality") or 0,
            post_id=data.get("link_id") or "",
            post_title=data.get("link_title") or "",
            post_permalink=data.get("link_permalink") or "",
            post_author=data.get("link_author") or "",
            post_num_comments=data.get("num_comments") or 0,
            is_submitter=bool(data.get("is_submitter")),
            score_hidden=bool(data.get("score_hidden")),
            saved=bool(data.get("saved")),
            stickied=bool(data.get("stickied")),
        )

    def to_dict(self) -> dict:
        return _to_dict(self)


@dataclass
class Link:
    """A post (kind t3)"""
    id: str = ""
    full_id: str = ""
    created: Optional[datetime] = None
    edited: Optional[datetime] = None

    permalink: str = ""
    url: str = ""

    title: str = ""
    body: str = ""

    score: int = 0
    upvote_ratio: float = 0.0
    num_comments: int = 0

    subreddit_name: str = ""
    subreddit_name_prefixed: str = ""
    subreddit_id: str = ""

    author: str = ""
    author_id: str = ""

    spoiler: bool = False
    locked: bool = False
    nsfw: bool = False
    is_self_post: bool = False
    saved: bool = False
    stickied: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Link":
        return cls(
            id=data.get("id") or "",
            full_id=data.get("name") or "",
            created=_timestamp(data.get("created_utc")),
            edited=_timestamp(data.get("edited")),
            permalink=data.get("permalink") or "",
            url=data.get("url") or "",
            title=data.get("title") or "",
            body=data.get("selftext") or "",
            score=data.get("score") or 0,
            upvote_ratio=data.get("upvote_ratio") or 0.0,
            num_comments=data.get("num_comments") or 0,
            subreddit_name=data.get("subreddit") or "",
            subreddit_name_prefixed=data.get("subreddit_name_prefixed") or "",
            subreddit_id=data.get("subreddit_id") or "",
            author=data.get("author") or "",
            author_id=data.get("author_fullname") or "",
            spoiler=bool(data.get("spoiler")),
            locked=bool(data.get("locked")),
            nsfw=bool(data.get("over_18")),
            is_self_post=bool(data.get("is_self")),
            saved=bool(data.get("saved")),
            stickied=bool(data.get("stickied")),
        )

    def to_dict(self) -> dict:
        return _to_dict(self)


@dataclass
class Subreddit:
    """A subreddit (kind t5)"""
    id: str = ""
    full_id: str = ""
    created: Optional[datetime] = None

    url: str = ""
    name: str = ""
    name_prefixed: str = ""
    title: str = ""
    description: str = ""
    type: str = ""
    suggested_comment_sort: str = ""

    subscribers: int = 0
    active_user_count: int = 0
    nsfw: bool = False

    user_is_moderator: bool = False
    subscribed: bool = False
    favorite: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Subreddit":
        return cls(
            id=data.get("id") or "",
            full_id=data.get("name") or "",
            created=_timestamp(data.get("created_utc")),
            url=data.get("url") or "",
            name=data.get("display_name") or "",
            name_prefixed=data.get("display_name_prefixed") or "",
            title=data.get("title") or "",
            description=data.get("public_description") or "",
            type=data.get("subreddit_type") or "",
            suggested_comment_sort=data.get("suggested_comment_sort") or "",
            subscribers=data.get("subscribers") or 0,
            active_user_count=data.get("active_user_count") or 0,
            nsfw=bool(data.get("over18")),
            user_is_moderator=bool(data.get("user_is_moderator")),
            subscribed=bool(data.get("user_is_subscriber")),
            favorite=bool(data.get("user_has_favorited")),
        )

    def to_dict(self) -> dict:
        return _to_dict(self)


@dataclass
class CommentsLinksSubreddits:
    """Things from a mixed listing, split by kind"""
    comments: list[Comment] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    subreddits: list[Subreddit] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "comments": [c.to_dict() for c in self.comments],
            "links": [l.to_dict() for l in self.links],
            "subreddits": [s.to_dict() for s in self.subreddits],
        }


def decode_listing(root: Optional[dict]) -> CommentsLinksSubreddits:
    """Split the children of a listing envelope into typed buckets.

    Only the ``kind`` of each child is inspected before its ``data`` is
    handed to the matching decoder. Children of any other kind are dropped.
    Order within each bucket follows the listing.
    """
    result = CommentsLinksSubreddits()
    data = (root or {}).get("data") or {}

    for child in data.get("children") or []:
        kind = child.get("kind")
        thing_data = child.get("data") or {}

        if kind == KIND_COMMENT:
            result.comments.append(Comment.from_dict(thing_data))
        elif kind == KIND_LINK:
            result.links.append(Link.from_dict(thing_data))
        elif kind == KIND_SUBREDDIT:
            result.subreddits.append(Subreddit.from_dict(thing_data))
        else:
            logger.debug("Dropping thing of unsupported kind {!r}", kind)

    return result
