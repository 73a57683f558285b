"""
Configuration constants for the Posts Client.

This module centralizes all configurable parameters so the client can be
pointed at a different origin or tuned without touching the layers that
use them.
"""

from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = "https://jsonplaceholder.typicode.com"
    posts_endpoint: str = "/posts"
    timeout_seconds: float = 10.0

    def post_path(self, post_id: int) -> str:
        """Get the relative path for a single post."""
        return f"{self.posts_endpoint}/{post_id}"


@dataclass
class PostsConfig:
    """Post creation defaults."""
    # The create form always submits on behalf of this user
    default_user_id: int = 1


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "posts_client.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    posts: PostsConfig = field(default_factory=PostsConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
