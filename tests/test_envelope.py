"""
Trainer API — Response Envelope Tests
=======================================

What:  Status and body of each envelope variant.
"""

import pytest

from trainer_api import envelope
from trainer_api.exceptions import NotFoundError, QueryError, RelatedRowMissingError


@pytest.mark.parametrize(
    "response, status",
    [
        (envelope.ok(), 200),
        (envelope.error(), 500),
        (envelope.not_found(), 404),
    ],
)
def test_variants_have_empty_bodies(response, status):
    assert response.status_code == status
    assert response.body == b""


@pytest.mark.parametrize(
    "exc, status",
    [
        (NotFoundError(resource="trainer", resource_id=1), 404),
        (QueryError(statement="SELECT 1"), 500),
        (RelatedRowMissingError(resource="region", resource_id=9), 500),
    ],
)
def test_for_exception(exc, status):
    assert envelope.for_exception(exc).status_code == status


class TestClientError:

    def test_path_error_is_400(self):
        errors = [{"loc": ("path", "trainer_id"), "type": "int_parsing"}]
        assert envelope.client_error(errors).status_code == 400

    def test_body_error_is_422(self):
        errors = [{"loc": ("body", "gym_leader"), "type": "missing"}]
        response = envelope.client_error(errors)
        assert response.status_code == 422
        assert response.body == b""

    def test_mixed_errors_prefer_path(self):
        errors = [
            {"loc": ("body", "name"), "type": "missing"},
            {"loc": ("path", "trainer_id"), "type": "int_parsing"},
        ]
        assert envelope.client_error(errors).status_code == 400
