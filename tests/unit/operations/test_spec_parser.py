"""Tests for install spec parsing."""

import pytest

from kitbag.errors import InvalidSpecError
from kitbag.models.spec import InstallSpec
from kitbag.operations.spec_parser import is_valid_namespace, parse_install_spec


def test_parses_namespace_and_path() -> None:
    spec = parse_install_spec("acme-tool:bundles/greeter")

    assert spec == InstallSpec(namespace="acme-tool", path="bundles/greeter", version=None)


def test_parses_trailing_version() -> None:
    spec = parse_install_spec("acme-tool:triggers/pre-commit.sh@v1.2.0")

    assert spec.namespace == "acme-tool"
    assert spec.path == "triggers/pre-commit.sh"
    assert spec.version == "v1.2.0"


def test_version_is_split_at_last_at_sign() -> None:
    spec = parse_install_spec("ns:snippets/a@b.md@main")

    assert spec.path == "snippets/a@b.md"
    assert spec.version == "main"


def test_path_keeps_later_colons() -> None:
    spec = parse_install_spec("ns:snippets/odd:name.md")

    assert spec.path == "snippets/odd:name.md"


@pytest.mark.parametrize(
    "text",
    ["acme:bundles/x", "acme:bundles/x@v1", "a-1:profiles/p.md"],
)
def test_format_reproduces_input(text: str) -> None:
    assert parse_install_spec(text).format() == text


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ("bundles/greeter", "missing ':'"),
        (":bundles/greeter", "namespace is empty"),
        ("acme:", "path is empty"),
        ("acme:@v1", "path is empty"),
        ("acme:bundles/x@", "version after '@' is empty"),
        ("Acme:bundles/x", "must match"),
        ("ac_me:bundles/x", "must match"),
    ],
)
def test_rejects_malformed_specs(text: str, reason: str) -> None:
    with pytest.raises(InvalidSpecError) as exc_info:
        parse_install_spec(text)

    assert reason in str(exc_info.value)
    assert exc_info.value.spec == text


def test_is_valid_namespace() -> None:
    assert is_valid_namespace("acme-tool")
    assert is_valid_namespace("a1")
    assert not is_valid_namespace("")
    assert not is_valid_namespace("Acme")
    assert not is_valid_namespace("acme tool")
