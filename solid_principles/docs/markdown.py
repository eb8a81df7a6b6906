# solid_principles/docs/markdown.py
"""
Render the catalogue as a Markdown document.

The document has one section per principle: the statement, then for each
half of the pairing its description, the source of its classes, the usage
snippet and the output the snippet produced when rendered.
"""

from __future__ import annotations

import inspect
import re
import textwrap
from pathlib import Path
from typing import Iterable, List, Optional, Union

from solid_principles.config import load_config
from solid_principles.core import Illustration, PrincipleExample, Transcript, Variant
from solid_principles.logging import tags
from solid_principles.logging.logger import get_logger
from solid_principles.runtime import get_registry

logger = get_logger(__name__)

DOCUMENT_TITLE = "SOLID Principles"
DOCUMENT_INTRO = (
    "Five object-oriented design principles, each shown as a class design that "
    "violates it, one that adheres to it, and a short snippet exercising both."
)

_HEADINGS = {
    Variant.VIOLATING: "Violating",
    Variant.ADHERING: "Adhering",
}


def source_of(member: object) -> str:
    """Dedented source of a class or function."""
    return textwrap.dedent(inspect.getsource(member)).rstrip()


def _code_block(body: str, language: str = "python") -> List[str]:
    return [f"```{language}", body, "```", ""]


def _heading(example: PrincipleExample) -> str:
    return f"{example.letter} - {example.title}"


def _anchor(heading: str) -> str:
    """GitHub-style heading slug."""
    slug = re.sub(r"[^\w\- ]", "", heading.strip().lower())
    return slug.replace(" ", "-")


def render_illustration(
    illustration: Illustration,
    variant: Variant,
    show_source: bool = True,
) -> List[str]:
    lines = [f"### {_HEADINGS[variant]}", "", illustration.description, ""]

    if show_source:
        body = "\n\n\n".join(source_of(member) for member in illustration.members)
        lines += _code_block(body)
        lines += ["Usage:", ""]
        lines += _code_block(source_of(illustration.driver))

    transcript = illustration.run(Transcript())
    lines += ["Output:", ""]
    lines += _code_block(transcript.text(), language="text")
    return lines


def render_example(example: PrincipleExample, show_source: bool = True) -> List[str]:
    lines = [f"## {_heading(example)}", "", example.summary, ""]
    for variant in (Variant.VIOLATING, Variant.ADHERING):
        lines += render_illustration(example.illustration(variant), variant, show_source)
    return lines


def render_markdown(
    examples: Optional[Iterable[PrincipleExample]] = None,
    show_source: Optional[bool] = None,
) -> str:
    """
    Build the full document.

    Args:
        examples: Examples to include; defaults to every registered principle
        show_source: Include class and snippet source; defaults to config

    Examples:
        >>> text = render_markdown()
        >>> text.splitlines()[0]
        '# SOLID Principles'
    """
    if examples is None:
        examples = get_registry().list()
    examples = list(examples)

    if show_source is None:
        show_source = load_config().output.show_source

    lines = [f"# {DOCUMENT_TITLE}", "", DOCUMENT_INTRO, ""]
    for example in examples:
        heading = _heading(example)
        lines.append(f"- [{heading}](#{_anchor(heading)})")
    lines.append("")

    for example in examples:
        lines += render_example(example, show_source=show_source)

    logger.debug(f"{tags.DOCS} Rendered {len(examples)} principle(s)")
    return "\n".join(lines).rstrip() + "\n"


def write_markdown(path: Union[str, Path], show_source: Optional[bool] = None) -> Path:
    """Render every principle and write the document to `path`."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_markdown(show_source=show_source), encoding="utf-8")
    logger.info(f"{tags.DOCS} Wrote {target}")
    return target
