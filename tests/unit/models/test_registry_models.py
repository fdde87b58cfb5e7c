"""Tests for registry document models."""

import pytest
from pydantic import ValidationError

from kitbag.models.registry import RegistryDocument, RepositoryRegistration
from tests.fakes.time import DEFAULT_TEST_TIME
from tests.test_utils.builders import make_registration


def test_add_find_and_remove_registrations() -> None:
    document = RegistryDocument().with_repo(make_registration("acme-tool"))
    document = document.with_repo(make_registration("beta-repo", owner="beta", repo="repo"))

    assert [r.namespace for r in document.repos] == ["acme-tool", "beta-repo"]
    assert document.find("beta-repo") is not None
    assert document.find("missing") is None
    assert [r.namespace for r in document.without_repo("acme-tool").repos] == ["beta-repo"]


def test_namespace_must_be_lowercase_slug() -> None:
    with pytest.raises(ValidationError):
        RepositoryRegistration(
            namespace="Acme Tool",
            url="https://github.com/acme/tools",
            owner="acme",
            repo="tools",
            default_branch="main",
            added_at=DEFAULT_TEST_TIME,
        )
