import json
from io import StringIO

import pytest
import yaml
from rich.console import Console

from transifex_client.client.resource_classes import Language, User
from transifex_client.printing import format_resource, print_resource, print_resources

USER = User.model_validate({"id": "u:jane", "type": "users", "attributes": {"username": "jane"}})
LANGUAGE = Language.model_validate(
    {
        "id": "l:fr",
        "type": "languages",
        "attributes": {"code": "fr", "rtl": False, "plural_rules": {"one": "n in 0..1"}},
    }
)


@pytest.fixture
def console() -> Console:
    return Console(file=StringIO(), width=200)


def output(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


class TestPrintResource:
    def test_text(self, console: Console) -> None:
        print_resource(LANGUAGE, "text", console)

        assert output(console).splitlines() == [
            "id: l:fr",
            "type: languages",
            "attributes:",
            "  code: fr",
            "  rtl: false",
            "  plural_rules:",
            "    one: n in 0..1",
        ]

    def test_json(self, console: Console) -> None:
        print_resource(LANGUAGE, "json", console)

        assert json.loads(output(console)) == LANGUAGE.dump()

    def test_yaml(self, console: Console) -> None:
        print_resource(USER, "yaml", console)

        assert yaml.safe_load(output(console)) == {"id": "u:jane", "type": "users", "attributes": {"username": "jane"}}

    def test_markup_in_values_is_escaped(self) -> None:
        user = User.model_validate({"id": "u:x", "type": "users", "attributes": {"username": "[bold]x[/]"}})

        assert "\\[bold]x\\[/]" in format_resource(user, "text")

    def test_unknown_format(self, console: Console) -> None:
        with pytest.raises(ValueError):
            print_resource(USER, "xml", console)  # type: ignore[arg-type]


class TestPrintResources:
    def test_json_array(self, console: Console) -> None:
        print_resources([USER, LANGUAGE], "json", console)

        assert json.loads(output(console)) == [USER.dump(), LANGUAGE.dump()]

    def test_yaml_documents(self, console: Console) -> None:
        print_resources([USER, LANGUAGE], "yaml", console)

        assert list(yaml.safe_load_all(output(console))) == [USER.dump(), LANGUAGE.dump()]

    def test_text_separated_by_blank_line(self, console: Console) -> None:
        print_resources([USER, USER], "text", console)

        assert output(console).count("id: u:jane") == 2
        assert "\n\n" in output(console)

    def test_unknown_format_with_empty_page(self, console: Console) -> None:
        with pytest.raises(ValueError):
            print_resources([], "csv", console)  # type: ignore[arg-type]
