"""Query options and response models for user, follow and retweet endpoints."""

__version__ = "0.1.0"
__all__ = ["options", "user_raw", "retweet"]