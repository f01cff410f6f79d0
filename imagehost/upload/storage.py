import logging
import os
from urllib.parse import quote

import boto3
from boto3.exceptions import Boto3Error
from botocore.exceptions import BotoCoreError, ClientError
from flask import current_app, request

from .exceptions import StorageWriteFailed
from .naming import generate_name

logger = logging.getLogger(__name__)

NAME_ATTEMPTS = 5


class LocalStorage:
    """Local filesystem storage for uploaded images.

    Files are opened in exclusive-create mode, so a generated name that is
    already on disk makes us draw another one instead of overwriting.
    """

    def save(self, file):
        upload_folder = current_app.config["UPLOAD_FOLDER"]
        try:
            os.makedirs(upload_folder, exist_ok=True)
        except OSError as exc:
            logger.exception("Cannot prepare storage root %s", upload_folder)
            raise StorageWriteFailed() from exc

        for _ in range(NAME_ATTEMPTS):
            filename = generate_name(file.filename)
            filepath = os.path.join(upload_folder, filename)
            try:
                dst = open(filepath, "xb")
            except FileExistsError:
                logger.warning("Name %s already taken, drawing another", filename)
                continue
            except (OSError, ValueError) as exc:
                logger.exception("Cannot create %s", filepath)
                raise StorageWriteFailed() from exc

            try:
                with dst:
                    file.save(dst)
            except OSError as exc:
                logger.exception("Write to %s failed", filepath)
                _discard(filepath)
                raise StorageWriteFailed() from exc
            return filename

        raise StorageWriteFailed("Could not allocate a unique filename")

    def get_url(self, filename):
        prefix = current_app.config["UPLOAD_URL_PREFIX"]
        return f"{request.scheme}://{request.host}/{prefix}/{quote(filename)}"


class S3Storage:
    def __init__(self, bucket, prefix="uploads"):
        self.bucket = bucket
        self.prefix = prefix
        self.s3 = boto3.client("s3")

    def save(self, file):
        filename = generate_name(file.filename)
        key = self._key(filename)
        try:
            self.s3.upload_fileobj(file.stream, self.bucket, key, ExtraArgs={
                "ContentType": file.content_type or "application/octet-stream",
            })
        except (Boto3Error, BotoCoreError, ClientError) as exc:
            logger.exception("Upload to s3://%s/%s failed", self.bucket, key)
            raise StorageWriteFailed() from exc
        return filename

    def get_url(self, filename):
        return f"https://{self.bucket}.s3.amazonaws.com/{quote(self._key(filename))}"

    def _key(self, filename):
        if not self.prefix:
            return filename
        return f"{self.prefix}/{filename}"


def _discard(filepath):
    try:
        os.remove(filepath)
    except OSError:
        logger.warning("Could not remove partial file %s", filepath)


def create_storage(config):
    if config.get("USE_OBJECT_STORAGE") and config.get("OBJECT_STORE_LOCATION"):
        return S3Storage(
            config["OBJECT_STORE_LOCATION"], prefix=config["UPLOAD_URL_PREFIX"]
        )
    return LocalStorage()


def get_storage():
    return current_app.extensions["storage"]
