from collections.abc import Mapping

from core.utils.constants import (
    DEFAULT_PHOTO_CONTENT_TYPE,
    IMAGE_MIME_PREFIX,
    MAX_EXTENSION_LENGTH,
    PHOTO_SUFFIX_CONTENT_TYPES,
)

SUFFIX_CONTENT_TYPES: Mapping[str, str] = PHOTO_SUFFIX_CONTENT_TYPES


def content_type_for(name: str) -> str:
    """Infer the content type of a stored photo from its name.

    Trusts the stored extension; anything unrecognised is served as JPEG.
    """
    lowered = name.lower()
    for suffix, mime in SUFFIX_CONTENT_TYPES.items():
        if lowered.endswith(suffix):
            return mime

    return DEFAULT_PHOTO_CONTENT_TYPE


def extension_of(filename: str) -> str:
    """Return the lowercase last dot-segment of a file name, dot included.

    Only the final path component is considered, so "a.b/c" has no extension.
    Suffixes longer than MAX_EXTENSION_LENGTH are dropped.
    """
    basename = filename.replace("\\", "/").rsplit("/", 1)[-1]
    dot = basename.rfind(".")
    if dot == -1 or len(basename) - dot > MAX_EXTENSION_LENGTH:
        return ""

    return basename[dot:].lower()


def is_image_mime_type(content_type: str | None) -> bool:
    if not content_type:
        return False

    return content_type.lower().startswith(IMAGE_MIME_PREFIX)
