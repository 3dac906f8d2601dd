from __future__ import annotations

import re
from pathlib import Path

MAX_FILENAME_LENGTH = 150
OCTET_STREAM = "application/octet-stream"

# Same list the file picker offers.
CV_CONTENT_TYPES = {
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".pdf": "application/pdf",
    ".txt": "text/plain",
}
CV_EXTENSIONS = frozenset(CV_CONTENT_TYPES)

_SAFE_NAME_RE = re.compile(r"[^A-Za-z0-9._-]+")


class CvFileError(ValueError):
    pass


def sanitize_filename(raw: str | None, *, default: str = "file") -> str:
    name = (raw or "").strip() or default
    name = name.replace("/", "_").replace("\\", "_")
    name = _SAFE_NAME_RE.sub("_", name).strip("._") or default

    if len(name) > MAX_FILENAME_LENGTH:
        base, ext = _split_name_ext(name)
        keep = max(1, MAX_FILENAME_LENGTH - len(ext))
        name = f"{base[:keep]}{ext}"
    return name


def cv_content_type(filename: str) -> str:
    return CV_CONTENT_TYPES.get(Path(filename).suffix.lower(), OCTET_STREAM)


def validate_cv_path(path: Path, *, max_bytes: int = 0) -> str:
    """Check a chosen CV file and return the filename to upload it under."""
    if not path.is_file():
        raise CvFileError(f"CV file not found: {path}")

    ext = path.suffix.lower()
    if ext not in CV_EXTENSIONS:
        raise CvFileError("Unsupported file type. Upload a PDF, DOC, DOCX or TXT file.")

    if max_bytes > 0 and path.stat().st_size > max_bytes:
        raise CvFileError("CV file exceeds max allowed size.")

    return sanitize_filename(path.name, default=f"cv{ext}")


def _split_name_ext(name: str) -> tuple[str, str]:
    ext = Path(name).suffix
    if ext:
        return name[: -len(ext)], ext
    return name, ""
