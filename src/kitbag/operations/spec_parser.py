"""Parse install specs of the form namespace:path[@version]."""

import re

from kitbag.errors import InvalidSpecError
from kitbag.models.spec import InstallSpec

NAMESPACE_PATTERN = re.compile(r"^[a-z0-9-]+$")


def parse_install_spec(text: str) -> InstallSpec:
    """Parse an install spec.

    The namespace runs up to the first colon and must match [a-z0-9-]+. The
    path is the remainder, minus an optional trailing @version. The version is
    returned as given; nothing here resolves it.

    Examples:
        >>> parse_install_spec("acme:bundles/web-fetch")
        InstallSpec(namespace='acme', path='bundles/web-fetch', version=None)
        >>> parse_install_spec("acme:triggers/pre-commit.sh@v1.2.0").version
        'v1.2.0'

    Raises:
        InvalidSpecError: On a missing colon, an empty or malformed namespace,
            an empty path, or an empty version after '@'
    """
    if ":" not in text:
        raise InvalidSpecError(text, "missing ':' between namespace and path")

    namespace, remainder = text.split(":", 1)
    if not namespace:
        raise InvalidSpecError(text, "namespace is empty")
    if NAMESPACE_PATTERN.match(namespace) is None:
        raise InvalidSpecError(text, f"namespace '{namespace}' must match [a-z0-9-]+")

    version: str | None = None
    path = remainder
    if "@" in remainder:
        path, version = remainder.rsplit("@", 1)
        if not version:
            raise InvalidSpecError(text, "version after '@' is empty")

    if not path:
        raise InvalidSpecError(text, "path is empty")

    return InstallSpec(namespace=namespace, path=path, version=version)


def is_valid_namespace(namespace: str) -> bool:
    return NAMESPACE_PATTERN.match(namespace) is not None
