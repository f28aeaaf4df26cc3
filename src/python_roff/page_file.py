"""
Loading man pages from YAML or JSON page descriptions.

A page file describes the header and the sections of a man page. Paragraph
and label text is inline markdown.

Example YAML file:
    ```yaml
    title: CORRUPT
    section: 1
    date: 2024-01-01
    source: corrupt 1.0
    sections:
      - title: NAME
        content:
          - paragraph: corrupt - modify files by randomly changing bits
      - title: OPTIONS
        content:
          - label: "**-n**, **--bits**=*BITS*"
            description: Set the number of bits to modify.
          - table:
              header: [Exit code, Meaning]
              rows:
                - ["0", success]
                - ["1", failure]
    ```

Example:
    >>> page = load_page("corrupt.yaml")
    >>> page.save("corrupt.1")
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml

from .errors import RoffError, ValidationError
from .manpage import Manpage
from .markdown_parser import parse_markdown

logger = logging.getLogger(__name__)

HEADER_KEYS = ("title", "section", "date", "source", "manual")


def load_page(path: str | Path, format: str | None = None) -> Manpage:
    """Load a page description file into a Manpage.

    Args:
        path: Path to the page file
        format: "yaml" or "json"; inferred from the file suffix when omitted
            (anything other than .json is read as YAML)

    Returns:
        The described Manpage

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If the file cannot be parsed or is malformed
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"Page file not found: {path}")

    if format is None:
        format = "json" if file_path.suffix.lower() == ".json" else "yaml"

    try:
        with open(file_path, encoding="utf-8") as f:
            if format == "yaml":
                data = yaml.safe_load(f)
            elif format == "json":
                data = json.load(f)
            else:
                raise ValidationError(f"Unsupported format: {format}")
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in {file_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {file_path}: {e}") from e

    logger.debug("Loaded page description from %s", file_path)
    return load_page_data(data)


def load_page_data(data: Any) -> Manpage:
    """Build a Manpage from an already parsed page description.

    Args:
        data: Mapping with the keys described in this module's docstring

    Returns:
        The described Manpage

    Raises:
        ValidationError: If the description is malformed; ``errors`` lists
            every problem found
    """
    if not isinstance(data, Mapping):
        raise ValidationError("Page file must contain a dictionary/object")

    if data.get("title") is None:
        raise ValidationError("Page file must contain a 'title' key")

    unknown = sorted(str(key) for key in set(data) - set(HEADER_KEYS) - {"sections"})
    if unknown:
        raise ValidationError("Unknown top-level keys", errors=[repr(key) for key in unknown])

    header = {key: _scalar(data[key]) for key in HEADER_KEYS if data.get(key) is not None}
    page = Manpage(**header)

    sections = data.get("sections") or []
    if not isinstance(sections, list):
        raise ValidationError("'sections' must be a list")

    errors: list[str] = []
    for i, section in enumerate(sections):
        if not isinstance(section, Mapping) or "title" not in section:
            errors.append(f"sections[{i}]: must be a mapping with a 'title' key")
            continue

        page.section(_scalar(section["title"]))

        content = section.get("content") or []
        if not isinstance(content, list):
            errors.append(f"sections[{i}].content: must be a list")
            continue

        for j, block in enumerate(content):
            problem = _apply_block(page, block)
            if problem:
                errors.append(f"sections[{i}].content[{j}]: {problem}")

    if errors:
        raise ValidationError("Invalid page description", errors=errors)

    logger.debug("Built %s(%s) with %d section(s)", page.title, page.section_number, len(sections))
    return page


def _scalar(value: Any) -> str:
    """Render YAML scalars (numbers, dates) the way they were written."""
    return str(value)


def _apply_block(page: Manpage, block: Any) -> str | None:
    """Apply one content block to ``page``.

    Returns:
        A description of the problem, or None if the block was applied
    """
    if not isinstance(block, Mapping):
        return "must be a mapping"

    # Dispatch table mapping block keys to handlers
    handlers: dict[str, Callable[[Manpage, Mapping[str, Any]], None]] = {
        "paragraph": _handle_paragraph,
        "label": _handle_label,
        "table": _handle_table,
        "comment": _handle_comment,
        "subsection": _handle_subsection,
    }

    kinds = [key for key in block if key in handlers]
    if len(kinds) != 1:
        return f"expected exactly one of {', '.join(handlers)}, got {sorted(map(str, block))}"

    try:
        handlers[kinds[0]](page, block)
    except (RoffError, TypeError, ValueError) as e:
        return str(e)
    return None


def _handle_paragraph(page: Manpage, block: Mapping[str, Any]) -> None:
    page.markdown(_scalar(block["paragraph"]))


def _handle_label(page: Manpage, block: Mapping[str, Any]) -> None:
    page.label(parse_markdown(_scalar(block["label"])), width=block.get("width"))
    if block.get("description") is not None:
        page.markdown(_scalar(block["description"]))


def _handle_table(page: Manpage, block: Mapping[str, Any]) -> None:
    table = block["table"]
    if not isinstance(table, Mapping) or not isinstance(table.get("rows"), list):
        raise ValueError("table must be a mapping with a 'rows' list")
    if not all(isinstance(row, list) for row in table["rows"]):
        raise ValueError("table rows must be lists of cells")
    page.table(
        table["rows"],
        header=table.get("header"),
        alignments=table.get("alignments"),
        boxed=bool(table.get("boxed", True)),
    )


def _handle_comment(page: Manpage, block: Mapping[str, Any]) -> None:
    page.comment(_scalar(block["comment"]))


def _handle_subsection(page: Manpage, block: Mapping[str, Any]) -> None:
    page.subsection(_scalar(block["subsection"]))
