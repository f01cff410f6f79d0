"""Errors raised while taking in an upload."""


class UploadError(Exception):
    """Base class for upload failures that map to an HTTP response."""

    status_code = 500
    message = "Upload failed"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {"error": self.message}


class NoFileSupplied(UploadError):
    """The request carried no file under the expected field."""

    status_code = 400
    message = "No file uploaded"


class StorageWriteFailed(UploadError):
    """The storage backend rejected the write."""

    status_code = 500
    message = "Failed to store file"
