"""Reddit API services used by the Reddit facade"""

from .listings import ListingsService
from .posts import PostService, SubmitSelfOptions, SubmitURLOptions, Submitted
from .things import Comment, CommentsLinksSubreddits, Link, Subreddit, decode_listing

__all__ = [
    'ListingsService',
    'PostService',
    'SubmitSelfOptions',
    'SubmitURLOptions',
    'Submitted',
    'Comment',
    'CommentsLinksSubreddits',
    'Link',
    'Subreddit',
    'decode_listing',
]
