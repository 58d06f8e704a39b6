"""Tests for MatrixQueryService."""

from __future__ import annotations

from accesscore import DEFAULT_CATALOG, MatrixQueryService


class TestListing:
    """Tests for list accessors."""

    def test_list_applications_declaration_order(self, query: MatrixQueryService) -> None:
        assert [a.app_code for a in query.list_applications()] == ["crm", "accounting"]

    def test_list_applications_display_order(self, query: MatrixQueryService) -> None:
        """display_order sorts by sort_order."""
        apps = query.list_applications(display_order=True)
        assert [a.app_code for a in apps] == ["accounting", "crm"]

    def test_display_order_is_stable(self) -> None:
        """Ties on sort_order keep declaration order."""
        query = MatrixQueryService(DEFAULT_CATALOG)
        codes = [a.app_code for a in query.list_applications(display_order=True)]
        # hr and project_management share sort_order 2
        assert codes.index("hr") < codes.index("project_management")
        assert codes[0] == "crm"

    def test_list_modules(self, query: MatrixQueryService) -> None:
        assert [m.module_code for m in query.list_modules("crm")] == ["leads", "dashboard"]

    def test_list_modules_unknown_app(self, query: MatrixQueryService) -> None:
        """Unknown application yields an empty list."""
        assert query.list_modules("nope") == []

    def test_list_permissions(self, query: MatrixQueryService) -> None:
        codes = [p.code for p in query.list_permissions("crm", "leads")]
        assert codes == ["read", "create"]

    def test_list_permissions_unknown_codes(self, query: MatrixQueryService) -> None:
        assert query.list_permissions("nope", "leads") == []
        assert query.list_permissions("crm", "nope") == []

    def test_returned_lists_are_copies(self, query: MatrixQueryService) -> None:
        """Mutating a returned list does not affect the catalog."""
        modules = query.list_modules("crm")
        modules.clear()
        assert len(query.list_modules("crm")) == 2


class TestDisplayLookups:
    """Tests for permission name / description fallbacks."""

    def test_permission_name(self, query: MatrixQueryService) -> None:
        assert query.permission_name("crm", "leads", "read") == "View Leads"

    def test_permission_name_falls_back_to_code(self, query: MatrixQueryService) -> None:
        assert query.permission_name("crm", "leads", "teleport") == "teleport"
        assert query.permission_name("nope", "nope", "read") == "read"

    def test_permission_description(self, query: MatrixQueryService) -> None:
        assert query.permission_description("crm", "leads", "read") == "View lead records"

    def test_permission_description_falls_back_to_empty(self, query: MatrixQueryService) -> None:
        assert query.permission_description("crm", "leads", "teleport") == ""
        assert query.permission_description("nope", "leads", "read") == ""

    def test_find_permission(self, query: MatrixQueryService) -> None:
        assert query.find_permission("crm", "leads", "create").name == "Create Leads"
        assert query.find_permission("crm", "leads", "teleport") is None
