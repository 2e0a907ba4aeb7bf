"""Unit tests for the ownership filter."""

import pytest

from salonflow.application.ownership import ResourceQuery, ScopedQuery, scope, scope_all, scope_point
from salonflow.domain.entities import Principal

U1 = Principal(id="u1", email="u1@example.com")


def test_scope_binds_owner_to_principal():
    query = scope(ResourceQuery(filters={"gender": "feminino"}), U1)

    assert isinstance(query, ScopedQuery)
    assert query.owner_id == "u1"
    assert dict(query.filters) == {"gender": "feminino"}
    assert not query.is_point_lookup


def test_point_lookup_is_a_conjunction_of_id_and_owner():
    query = scope_point("r1", U1)

    assert query.id == "r1"
    assert query.owner_id == "u1"
    assert query.is_point_lookup


def test_caller_cannot_filter_on_owner_or_id():
    query = scope_all(U1, {"owner_id": "u2", "id": "r9", "attended": True, "notes": None})

    assert query.owner_id == "u1"
    assert query.id is None
    assert dict(query.filters) == {"attended": True}


def test_scoped_filters_are_read_only():
    query = scope_all(U1, {"gender": "outro"})

    with pytest.raises(TypeError):
        query.filters["owner_id"] = "u2"  # type: ignore[index]


def test_principal_without_id_cannot_be_scoped():
    with pytest.raises(ValueError):
        scope(ResourceQuery(), Principal(id=""))
