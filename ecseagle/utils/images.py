"""Container image name utilities."""

from __future__ import annotations

from collections.abc import Iterable


def _is_registry_host(segment: str) -> bool:
    """Return True when the first image path segment names a registry."""
    return "." in segment or ":" in segment or segment == "localhost"


def short_image_name(image: str | None) -> str:
    """Strip the registry host from an image reference.

    ``111122223333.dkr.ecr.me-central-1.amazonaws.com/app:442`` -> ``app:442``.
    Images without a registry host (``nginx:1.25``, ``library/nginx``) are
    returned unchanged; surrounding whitespace is removed.
    """
    value = (image or "").strip()
    if not value:
        return ""
    head, sep, rest = value.partition("/")
    if sep and rest and _is_registry_host(head):
        return rest
    return value


def short_image_names(images: Iterable[str | None]) -> list[str]:
    """Shorten every image reference, dropping blank ones, keeping order."""
    result: list[str] = []
    for image in images:
        short = short_image_name(image)
        if short:
            result.append(short)
    return result


def join_image_names(images: Iterable[str], separator: str = "\n") -> str:
    """Join image names for display, one per line by default."""
    return separator.join(image for image in images if image)


__all__ = [
    "join_image_names",
    "short_image_name",
    "short_image_names",
]
