import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from os_list.infrastructure.github_client import DEFAULT_API_URL, DEFAULT_TIMEOUT


class Settings(BaseModel):
    """
    Runtime settings read from the environment. The GitHub token is not one of
    them; it is always passed on the command line.
    """
    model_config = ConfigDict(frozen=True)

    api_url: str = Field(DEFAULT_API_URL, description="GitHub GraphQL endpoint")
    request_timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Total request timeout in seconds")
    log_level: str = Field("WARNING", description="Root log level")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        # Load environment variables from .env file
        load_dotenv(dotenv_path)

        values = {
            "api_url": os.getenv("GITHUB_GRAPHQL_URL"),
            "request_timeout": os.getenv("OS_LIST_REQUEST_TIMEOUT"),
            "log_level": os.getenv("OS_LIST_LOG_LEVEL"),
        }
        return cls(**{key: value for key, value in values.items() if value})
