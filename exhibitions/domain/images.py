"""Image signature sniffing and upload policy.

No MIME metadata is stored with images, so the content type is always
inferred from the leading bytes.
"""

from exhibitions.domain.errors import ImagePolicyError

MAX_IMAGE_BYTES = 5 * 1024 * 1024

_SIGNATURES = (
    (b"\x89PNG", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF8", "image/gif"),
)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def detect_content_type(data: bytes) -> str | None:
    """Return the MIME type for PNG, JPEG or GIF bytes, else None."""
    for signature, content_type in _SIGNATURES:
        if data.startswith(signature):
            return content_type
    return None


def check_image_policy(data: bytes) -> str:
    """Validate an uploaded image and return its content type.

    Raises:
        ImagePolicyError: If the image is empty, larger than 5MB, or not a
            PNG, JPEG or GIF.
    """
    if not data:
        raise ImagePolicyError("Image is empty")
    if len(data) > MAX_IMAGE_BYTES:
        raise ImagePolicyError("Image must be 5MB or smaller")
    content_type = detect_content_type(data)
    if content_type is None:
        raise ImagePolicyError("Image must be a PNG, JPEG or GIF")
    return content_type
