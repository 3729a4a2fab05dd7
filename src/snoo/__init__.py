"""snoo - a small Reddit API client"""

from loguru import logger

from .errors import InvalidArgumentError, InvalidOptionsError, RedditError, SubmissionError
from .reddit import Reddit
from .services import (
    Comment,
    CommentsLinksSubreddits,
    Link,
    ListingsService,
    PostService,
    Subreddit,
    SubmitSelfOptions,
    SubmitURLOptions,
    Submitted,
)
from .utils.reddit_client import RedditClient

# Library code stays quiet until an application opts in via setup_logging
logger.disable("snoo")

__version__ = '0.1.0'

__all__ = [
    'Reddit',
    'RedditClient',
    'ListingsService',
    'PostService',
    'Comment',
    'CommentsLinksSubreddits',
    'Link',
    'Subreddit',
    'SubmitSelfOptions',
    'SubmitURLOptions',
    'Submitted',
    'RedditError',
    'InvalidArgumentError',
    'InvalidOptionsError',
    'SubmissionError',
]
