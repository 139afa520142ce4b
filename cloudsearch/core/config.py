from __future__ import annotations

__all__ = ["Config"]

import os
from typing import Any

from ._codec import Codec, JSONCodec
from .data_model import DataModel, DataModelField


class Config(DataModel):
    """CloudSearch client configuration.

    Attributes:
        region: AWS region name.
        search_domain: CloudSearch domain used for search and
            document requests.
        service_domain: Base AWS service domain.
        scheme: URL scheme.
        port: URL port, omitted when None.
        json_codec: Codec with encode and decode methods.
        profile_name: AWS profile name.
        aws_access_key_id: AWS access key id.
        aws_secret_access_key: AWS secret access key.
        aws_session_token: AWS session token.
    """

    region: str | None = None
    search_domain: str | None = None
    service_domain: str = "amazonaws.com"
    scheme: str = "https"
    port: int | None = None
    json_codec: Codec = DataModelField(default_factory=JSONCodec)
    profile_name: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = DataModelField(
        default=None, repr=False
    )
    aws_session_token: str | None = DataModelField(default=None, repr=False)

    @classmethod
    def from_env(cls, **overrides: Any) -> Config:
        """Create a config from environment variables.

        Args:
            overrides:
                Values taking precedence over the environment.

        Returns:
            Config.
        """
        env = os.environ
        values: dict[str, Any] = {
            "region": env.get("AWS_REGION", env.get("AWS_DEFAULT_REGION")),
            "search_domain": env.get("CLOUDSEARCH_DOMAIN"),
            "service_domain": env.get("CLOUDSEARCH_SERVICE_DOMAIN"),
            "profile_name": env.get("AWS_PROFILE"),
            "aws_access_key_id": env.get("AWS_ACCESS_KEY_ID"),
            "aws_secret_access_key": env.get("AWS_SECRET_ACCESS_KEY"),
            "aws_session_token": env.get("AWS_SESSION_TOKEN"),
        }
        values.update(overrides)
        return cls(**{k: v for k, v in values.items() if v is not None})
