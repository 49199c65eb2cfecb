"""Filesystem-backed implementation of PhotoStoreRepository."""

import shutil
import uuid
from pathlib import Path
from typing import BinaryIO

from aws_lambda_powertools import Logger

from core.models.errors import (
    EmptyInputError,
    InvalidNameError,
    PhotoNotFoundError,
    StorageIOError,
)
from core.repositories.photo_repository import LoadedPhoto, PhotoStoreRepository
from core.utils.constants import (
    COPY_BUFFER_SIZE,
    ERROR_CODE_PHOTO_DELETE_FAILED,
    ERROR_CODE_PHOTO_LOAD_FAILED,
    ERROR_CODE_PHOTO_UPLOAD_FAILED,
)
from core.utils.mime import content_type_for, extension_of

logger = Logger(UTC=True)


class LocalPhotoStore(PhotoStoreRepository):
    """Pet photo storage in one flat directory on the local filesystem.

    Photos are named `<uuid4><ext>`; nothing but the extension of the
    uploaded file name ever reaches the filesystem path. Every identifier
    handed back in for load/delete is resolved and must land directly
    inside the root directory.

    The store keeps no state beyond its root, so one instance can serve
    concurrent callers. On POSIX, a stream returned by `load` stays readable
    if the file is deleted afterwards.
    """

    def __init__(self, root: str | Path) -> None:
        """Create the store, creating the root directory if needed.

        Raises:
            StorageIOError: If the root directory cannot be created
        """
        self._root = Path(root).expanduser().resolve()

        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.exception(
                "Unable to create photo storage directory",
                extra={"root": str(self._root)},
            )
            raise StorageIOError(
                message="Unable to initialize photo storage",
                details={"root": str(self._root)},
            ) from exc

    @property
    def root(self) -> Path:
        return self._root

    @staticmethod
    def generate_identifier(extension: str) -> str:
        """Generate a unique, non-guessable photo identifier."""
        return f"{uuid.uuid4()}{extension}"

    def store(
        self,
        content: BinaryIO,
        original_filename: str | None,
        *,
        is_empty: bool,
    ) -> str:
        """Copy the uploaded stream into a new file and return its identifier."""
        if is_empty:
            raise EmptyInputError(message="Cannot store empty file")

        identifier = self.generate_identifier(self.validate_filename(original_filename))
        target = self._root / identifier

        logger.debug(
            "Storing photo",
            extra={"identifier": identifier, "original_filename": original_filename},
        )

        try:
            with target.open("wb") as out:
                shutil.copyfileobj(content, out, COPY_BUFFER_SIZE)
        except OSError as exc:
            logger.error("Photo write failed", extra={"identifier": identifier})

            # Best-effort cleanup of the partial file
            try:
                target.unlink(missing_ok=True)
            except OSError:
                logger.warning(
                    "Failed to clean up partially written photo",
                    extra={"identifier": identifier},
                )

            raise StorageIOError(
                message="Unable to store photo",
                error_code=ERROR_CODE_PHOTO_UPLOAD_FAILED,
                details={"identifier": identifier, "reason": exc.strerror or str(exc)},
            ) from exc

        logger.info("Photo stored", extra={"identifier": identifier})
        return identifier

    def validate_filename(self, original_filename: str | None) -> str:
        """Reject unusable declared names and return the extension to keep."""
        if (
            original_filename is None
            or ".." in original_filename
            or "\x00" in original_filename
        ):
            logger.warning(
                "Rejected photo file name",
                extra={"original_filename": repr(original_filename)},
            )
            raise InvalidNameError(
                message=f"Invalid file name: {original_filename!r}",
                details={"file_name": original_filename},
            )

        return extension_of(original_filename)

    def load(self, identifier: str) -> LoadedPhoto:
        """Open a stored photo and infer its content type from the name."""
        path = self._resolve(identifier)
        if path is None or not path.is_file():
            logger.warning("Photo not found", extra={"identifier": identifier})
            raise PhotoNotFoundError(
                message=f"Photo not found: {identifier}",
                details={"identifier": identifier},
            )

        try:
            stream = path.open("rb")
        except (FileNotFoundError, PermissionError, IsADirectoryError) as exc:
            logger.warning("Photo not readable", extra={"identifier": identifier})
            raise PhotoNotFoundError(
                message=f"Photo not found: {identifier}",
                details={"identifier": identifier},
            ) from exc
        except OSError as exc:
            logger.error("Photo read failed", extra={"identifier": identifier})
            raise StorageIOError(
                message="Unable to load photo",
                error_code=ERROR_CODE_PHOTO_LOAD_FAILED,
                details={"identifier": identifier},
            ) from exc

        return LoadedPhoto(
            stream=stream,
            content_type=content_type_for(path.name),
            name=path.name,
        )

    def delete(self, identifier: str | None) -> None:
        """Remove a stored photo if it exists."""
        if not identifier:
            return

        path = self._resolve(identifier)
        if path is None:
            raise InvalidNameError(
                message=f"Invalid photo identifier: {identifier}",
                details={"identifier": identifier},
            )

        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.error("Photo deletion failed", extra={"identifier": identifier})
            raise StorageIOError(
                message="Unable to delete photo",
                error_code=ERROR_CODE_PHOTO_DELETE_FAILED,
                details={"identifier": identifier, "reason": exc.strerror or str(exc)},
            ) from exc

        logger.info("Photo deleted", extra={"identifier": identifier})

    def _resolve(self, identifier: str) -> Path | None:
        """Resolve an identifier to a path directly under the root, or None."""
        try:
            path = (self._root / identifier).resolve()
        except (OSError, ValueError):
            return None

        if path.parent != self._root:
            logger.warning(
                "Rejected identifier outside photo root",
                extra={"identifier": identifier},
            )
            return None

        return path
