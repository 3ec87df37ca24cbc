import pytest

from transifex_client.client.resource_classes import Project
from transifex_client.client.tx_client import PagedResponse, PaginationLinks, extract_cursor


class TestExtractCursor:
    @pytest.mark.parametrize(
        "link, expected",
        [
            pytest.param(
                "https://rest.api.transifex.com/projects?filter[organization]=o:acme&page[cursor]=abc",
                "abc",
                id="page cursor",
            ),
            pytest.param(
                "https://rest.api.transifex.com/projects?filter%5Borganization%5D=o%3Aacme&page%5Bcursor%5D=ey%3D%3D",
                "ey%3D%3D",
                id="percent encoded",
            ),
            pytest.param(
                "https://rest.api.transifex.com/projects?page[cursor]=ab%2Bcd%26x%25y",
                "ab%2Bcd%26x%25y",
                id="escapes kept",
            ),
            pytest.param("https://rest.api.transifex.com/projects?page[cursor]=ab+cd", "ab+cd", id="plus kept"),
            pytest.param(
                "https://rest.api.transifex.com/projects?page[cursor]=&cursor=xyz", "xyz", id="empty value skipped"
            ),
            pytest.param("https://rest.api.transifex.com/languages?cursor=xyz", "xyz", id="plain cursor"),
            pytest.param("https://rest.api.transifex.com/languages?filter[slug]=demo", None, id="no cursor"),
            pytest.param("", None, id="empty"),
            pytest.param(None, None, id="none"),
        ],
    )
    def test_extract_cursor(self, link: str | None, expected: str | None) -> None:
        assert extract_cursor(link) == expected


class TestPaginationLinks:
    def test_empty_links_are_none(self) -> None:
        links = PaginationLinks.model_validate({"self": "", "next": "", "previous": ""})

        assert (links.self_, links.next, links.previous) == (None, None, None)

    def test_self_alias(self) -> None:
        links = PaginationLinks.model_validate({"self": "https://rest.api.transifex.com/projects"})

        assert links.self_ == "https://rest.api.transifex.com/projects"

    def test_paged_response_defaults(self) -> None:
        page = PagedResponse[Project].model_validate({"data": []})

        assert page.included == []
        assert page.next_cursor is None
        assert page.previous_cursor is None
