"""Fetching things by fullname"""

from ..errors import InvalidArgumentError
from ..utils.reddit_client import RedditClient
from .things import CommentsLinksSubreddits, decode_listing


class ListingsService:
    """Listing endpoints of the Reddit API."""

    def __init__(self, client: RedditClient):
        self.client = client

    def get(self, *ids: str) -> CommentsLinksSubreddits:
        """Get things by their fullnames (e.g. 't3_abc123', 't1_def456').

        Only comments, links and subreddits are kept; anything else Reddit
        returns is dropped.

        Raises:
            InvalidArgumentError: if no IDs are given
        """
        if not ids:
            raise InvalidArgumentError("must provide at least 1 id")

        root = self.client.get("api/info", {"id": ",".join(ids)})
        return decode_listing(root)
