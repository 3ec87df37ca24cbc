"""Helpers to show entities on the terminal."""

import json
from collections.abc import Sequence
from typing import Any, Literal, TypeAlias

from rich.console import Console
from rich.markup import escape

from transifex_client.client._resource_base import BaseModelObject

OutputFormat: TypeAlias = Literal["text", "json", "yaml"]
OUTPUT_FORMATS: tuple[OutputFormat, ...] = ("text", "json", "yaml")

_INDENT = "  "


def _text_lines(value: Any, depth: int = 0) -> list[str]:
    prefix = _INDENT * depth
    lines: list[str] = []
    if isinstance(value, dict):
        for key, item in value.items():
            if isinstance(item, dict | list) and item:
                lines.append(f"{prefix}[bold]{escape(str(key))}[/]:")
                lines.extend(_text_lines(item, depth + 1))
            else:
                lines.append(f"{prefix}[bold]{escape(str(key))}[/]: {escape(_scalar(item))}")
    elif isinstance(value, list):
        for item in value:
            if isinstance(item, dict | list) and item:
                lines.append(f"{prefix}-")
                lines.extend(_text_lines(item, depth + 1))
            else:
                lines.append(f"{prefix}- {escape(_scalar(item))}")
    else:
        lines.append(f"{prefix}{escape(_scalar(value))}")
    return lines


def _scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, dict | list):
        return json.dumps(value)
    return str(value)


def format_resource(resource: BaseModelObject, output_format: OutputFormat = "text") -> str:
    """Render an entity as a string.

    Args:
        resource: The entity to render.
        output_format: "text" for indented key/value lines with rich markup, "json" or "yaml".

    Returns:
        str: The rendered entity.

    Raises:
        ValueError: If the output format is not supported.
    """
    if output_format == "text":
        return "\n".join(_text_lines(resource.dump()))
    elif output_format == "json":
        return json.dumps(resource.dump(), indent=2, ensure_ascii=False)
    elif output_format == "yaml":
        return resource.dump_yaml()
    raise ValueError(f"Unsupported output format {output_format!r}. Expected one of: {', '.join(OUTPUT_FORMATS)}")


def print_resource(
    resource: BaseModelObject, output_format: OutputFormat = "text", console: Console | None = None
) -> None:
    console = console or Console()
    rendered = format_resource(resource, output_format)
    if output_format == "text":
        console.print(rendered, emoji=False)
    else:
        # JSON and YAML are printed as is, rich would read brackets as markup.
        console.print(rendered, markup=False, emoji=False, highlight=False, soft_wrap=True)


def print_resources(
    resources: Sequence[BaseModelObject], output_format: OutputFormat = "text", console: Console | None = None
) -> None:
    """Print a page of entities. JSON output is a single array."""
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format {output_format!r}. Expected one of: {', '.join(OUTPUT_FORMATS)}")
    console = console or Console()
    if output_format == "json":
        rendered = json.dumps([resource.dump() for resource in resources], indent=2, ensure_ascii=False)
        console.print(rendered, markup=False, emoji=False, highlight=False, soft_wrap=True)
        return
    for no, resource in enumerate(resources):
        if no and output_format == "text":
            console.print()
        elif no and output_format == "yaml":
            console.print("---", markup=False, emoji=False, highlight=False)
        print_resource(resource, output_format, console)
