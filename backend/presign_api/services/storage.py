from typing import Final

import boto3
from botocore.client import Config

from presign_api.core.config import Settings

_CLIENT_METHODS: Final[dict[str, str]] = {
    "PUT": "put_object",
    "GET": "get_object",
}


class S3UrlSigner:
    """Signs S3 requests locally with the configured credentials.

    No request reaches the object store: botocore computes the SigV4 query
    string from the credentials held by the client.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        addressing_style = "path" if settings.s3_force_path_style else "virtual"
        session = boto3.session.Session()
        self.client = session.client(
            "s3",
            endpoint_url=str(settings.s3_endpoint).rstrip("/") if settings.s3_endpoint else None,
            aws_access_key_id=settings.s3_access_key,
            aws_secret_access_key=settings.s3_secret_key,
            region_name=settings.s3_region,
            config=Config(
                signature_version="s3v4",
                s3={"addressing_style": addressing_style},
            ),
        )

    def sign(
        self,
        method: str,
        bucket: str,
        key: str,
        content_type: str | None,
        expires_in: int,
    ) -> str:
        client_method = _CLIENT_METHODS.get(method.upper())
        if client_method is None:
            raise ValueError(f"Unsupported method for presigning: {method}")

        params = {"Bucket": bucket, "Key": key}
        if client_method == "put_object" and content_type:
            params["ContentType"] = content_type

        return self.client.generate_presigned_url(
            client_method,
            Params=params,
            ExpiresIn=expires_in,
        )
