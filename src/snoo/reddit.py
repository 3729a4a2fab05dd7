"""The Reddit facade: one transport, one instance of each service"""

from typing import Optional

from .services import ListingsService, PostService
from .utils.config import get_reddit_client, load_config
from .utils.reddit_client import RedditClient


class Reddit:
    """Entry point for the library.

    Example:
        with Reddit.from_config() as reddit:
            things = reddit.listings.get("t3_abc123")
    """

    def __init__(self, client: RedditClient):
        self.client = client
        self.listings = ListingsService(client)
        self.posts = PostService(client)

    @classmethod
    def from_config(cls, config: Optional[dict] = None) -> "Reddit":
        """Build a Reddit instance from ~/.snoorc and REDDIT_* env vars"""
        return cls(get_reddit_client(config or load_config()))

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.client.close()
