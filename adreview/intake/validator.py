"""Upload checks shared by the QC and CRM endpoints."""

from adreview.intake.models import UploadedFile

ALLOWED_IMAGE_TYPES = frozenset({"image/jpeg", "image/png", "image/webp", "image/gif"})
PDF_CONTENT_TYPE = "application/pdf"


def validate_files(
    image: UploadedFile | None,
    prd: UploadedFile | None,
    *,
    max_image_size_bytes: int,
    max_prd_size_bytes: int,
    image_required: bool = True,
    prd_required: bool = True,
) -> list[str]:
    """Return human-readable problems with the uploads, empty when valid."""
    errors: list[str] = []

    if image is None:
        if image_required:
            errors.append("Image file is required")
    else:
        errors.extend(_check_image(image, max_image_size_bytes))

    if prd is None:
        if prd_required:
            errors.append("PRD file is required")
    else:
        errors.extend(_check_prd(prd, max_prd_size_bytes))

    return errors


def _check_image(image: UploadedFile, max_size: int) -> list[str]:
    errors: list[str] = []
    if _base_type(image.content_type) not in ALLOWED_IMAGE_TYPES:
        errors.append(
            f"Image must be one of {sorted(ALLOWED_IMAGE_TYPES)}, "
            f"got '{image.content_type}'"
        )
    if image.size == 0:
        errors.append("Image file is empty")
    elif image.size > max_size:
        errors.append(f"Image exceeds maximum size of {_format_size(max_size)}")
    return errors


def _check_prd(prd: UploadedFile, max_size: int) -> list[str]:
    errors: list[str] = []
    if _base_type(prd.content_type) != PDF_CONTENT_TYPE:
        errors.append(f"PRD must be a PDF file, got '{prd.content_type}'")
    if prd.size == 0:
        errors.append("PRD file is empty")
    elif prd.size > max_size:
        errors.append(f"PRD exceeds maximum size of {_format_size(max_size)}")
    return errors


def _base_type(content_type: str) -> str:
    # "image/png; charset=binary" -> "image/png"
    return content_type.split(";", 1)[0].strip().lower()


def _format_size(size_bytes: int) -> str:
    megabytes = size_bytes / (1024 * 1024)
    return f"{megabytes:g} MB"
