"""
Unit tests for notebook resolution
"""

import pytest
from core.exceptions import NotFoundError
from upstream.resolver import filter_notebooks, resolve_notebook
from upstream.schemas import WorkspaceObject


def _objects(*pairs):
    return [WorkspaceObject(path=path, object_type=object_type) for path, object_type in pairs]


class TestResolveNotebook:

    def test_case_insensitive_match_skips_non_notebooks(self):
        objects = _objects(("/a/Foo", "NOTEBOOK"), ("/a/bar", "FILE"))

        result = resolve_notebook(objects, "foo")

        assert result is objects[0]

    def test_first_match_in_upstream_order_wins(self):
        objects = _objects(
            ("/a/sales_daily", "NOTEBOOK"),
            ("/a/SALES_weekly", "NOTEBOOK"),
        )

        assert resolve_notebook(objects, "Sales").path == "/a/sales_daily"

    def test_non_notebook_path_match_is_not_found(self):
        objects = _objects(("/a/report", "NOTEBOOK"), ("/a/foo.csv", "FILE"), ("/a/foo", "DIRECTORY"))

        with pytest.raises(NotFoundError) as exc_info:
            resolve_notebook(objects, "foo")

        assert exc_info.value.message == "No notebook found matching source: foo"

    def test_empty_listing_is_not_found(self):
        with pytest.raises(NotFoundError):
            resolve_notebook([], "anything")

    def test_matches_anywhere_in_path(self):
        objects = _objects(("/Shared/pipelines/Inventory_Load", "NOTEBOOK"))

        assert resolve_notebook(objects, "pipelines/inv").path == "/Shared/pipelines/Inventory_Load"


def test_filter_notebooks_keeps_order():
    objects = _objects(("/x", "NOTEBOOK"), ("/y", "DIRECTORY"), ("/z", "NOTEBOOK"), ("/w", "LIBRARY"))

    assert [obj.path for obj in filter_notebooks(objects)] == ["/x", "/z"]
