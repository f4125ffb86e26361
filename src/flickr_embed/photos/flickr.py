"""Flickr REST API client.

Implements the two read-only lookups the embed pipeline needs:
flickr.photos.getInfo and flickr.photos.getSizes.
"""

import hashlib
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from ..errors import PhotoServiceError
from .base import PhotoInfo, PhotoServiceClient, PhotoSize

DEFAULT_API_URL = "https://api.flickr.com/services/rest/"


class FlickrClient(PhotoServiceClient):
    """Photo service client backed by the Flickr REST API.

    Requests use the JSON response format. When a secret is configured every
    request carries an ``api_sig`` signature, as Flickr's API kits do.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str = "",
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
    ):
        """Initialize the Flickr client.

        Args:
            api_key: Flickr API key
            api_secret: Optional API secret used to sign requests
            base_url: REST endpoint URL
            timeout: HTTP request timeout in seconds

        """
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = base_url
        self.timeout = timeout
        logger.debug("FlickrClient initialized: url={}, signed={}", base_url, bool(api_secret))

    def get_photo_info(self, photo_id: str) -> PhotoInfo | None:
        """Look up a photo's title and page URL via flickr.photos.getInfo."""
        data = self._call("flickr.photos.getInfo", photo_id=photo_id)
        if data is None:
            return None

        try:
            photo = data.get("photo") or {}
            title = (photo.get("title") or {}).get("_content", "")
            urls = (photo.get("urls") or {}).get("url") or []
            if urls:
                link_url = urls[0].get("_content", "")
            else:
                owner = (photo.get("owner") or {}).get("nsid", "")
                link_url = f"https://www.flickr.com/photos/{owner}/{photo_id}/"
            return PhotoInfo(title=title, link_url=link_url)
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            logger.warning("Malformed getInfo payload for {}: {}", photo_id, e)
            raise PhotoServiceError("flickr.photos.getInfo returned a malformed photo") from e

    def get_photo_sizes(self, photo_id: str) -> list[PhotoSize]:
        """List a photo's size variants via flickr.photos.getSizes."""
        data = self._call("flickr.photos.getSizes", photo_id=photo_id)
        if data is None:
            return []

        try:
            entries = (data.get("sizes") or {}).get("size") or []
        except AttributeError as e:
            logger.warning("Malformed getSizes payload for {}: {}", photo_id, e)
            raise PhotoServiceError("flickr.photos.getSizes returned malformed sizes") from e

        sizes = []
        for entry in entries:
            try:
                sizes.append(
                    PhotoSize(label=entry["label"], width=entry["width"], url=entry["source"])
                )
            except (KeyError, TypeError, ValidationError) as e:
                logger.debug("Skipping malformed size entry for {}: {}", photo_id, e)
        return sizes

    def _call(self, method: str, **params: str) -> dict[str, Any] | None:
        """
        Call a Flickr REST method.

        Returns:
            The decoded response, or None when Flickr answers ``stat: fail``

        Raises:
            PhotoServiceError: On transport errors, HTTP errors or invalid JSON
        """
        args = {
            "method": method,
            "api_key": self.api_key,
            "format": "json",
            "nojsoncallback": "1",
            **params,
        }
        if self.api_secret:
            args["api_sig"] = self._sign(args)

        logger.debug("Calling Flickr {} with {}", method, params)
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(self.base_url, params=args)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.warning("Flickr {} failed: {}", method, e)
            raise PhotoServiceError(f"{method} failed: {e}") from e
        except ValueError as e:
            logger.warning("Flickr {} returned invalid JSON: {}", method, e)
            raise PhotoServiceError(f"{method} returned invalid JSON") from e

        if not isinstance(data, dict):
            logger.warning("Flickr {} returned an unexpected payload: {!r}", method, data)
            raise PhotoServiceError(f"{method} returned an unexpected payload")
        if data.get("stat") != "ok":
            logger.debug(
                "Flickr {} returned an error: code={}, message={}",
                method,
                data.get("code"),
                data.get("message"),
            )
            return None
        return data

    def _sign(self, args: dict[str, str]) -> str:
        """Compute the api_sig for a set of request arguments."""
        payload = "".join(f"{key}{value}" for key, value in sorted(args.items()))
        return hashlib.md5((self.api_secret + payload).encode("utf-8")).hexdigest()
