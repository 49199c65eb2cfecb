"""Abstract contract for pet photo file storage."""

from abc import ABC, abstractmethod
from typing import BinaryIO, NamedTuple


class LoadedPhoto(NamedTuple):
    """A stored photo opened for reading.

    The caller owns `stream` and must close it.
    """

    stream: BinaryIO
    content_type: str
    name: str


class PhotoStoreRepository(ABC):
    """Contract for storing, serving and removing pet photos by identifier.

    Implementations could be local disk, S3, etc.
    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def store(
        self,
        content: BinaryIO,
        original_filename: str | None,
        *,
        is_empty: bool,
    ) -> str:
        """Persist photo bytes under a freshly generated identifier.

        Args:
            content: Readable binary stream with the photo bytes
            original_filename: Name declared by the uploader; only its
                extension is kept
            is_empty: Whether the caller knows the stream holds no bytes

        Returns:
            Identifier of the stored photo (e.g. "<uuid>.png")

        Raises:
            EmptyInputError: If `is_empty` is set
            InvalidNameError: If the filename fails `validate_filename`
            StorageIOError: If the bytes cannot be written
        """

    @abstractmethod
    def validate_filename(self, original_filename: str | None) -> str:
        """Check a declared file name and return the extension `store` would keep.

        Lets callers reject a bad name before touching existing photos.

        Raises:
            InvalidNameError: If the filename is missing or holds ".." or a NUL byte
        """

    @abstractmethod
    def load(self, identifier: str) -> LoadedPhoto:
        """Open a stored photo for reading.

        Raises:
            PhotoNotFoundError: If no readable photo exists under the identifier
        """

    @abstractmethod
    def delete(self, identifier: str | None) -> None:
        """Remove a stored photo. Missing photos and empty identifiers are no-ops.

        Raises:
            InvalidNameError: If the identifier points outside the store
            StorageIOError: If removal fails
        """
