"""uml-entities -- Generate C# entity models from PlantUML class diagrams."""

from __future__ import annotations

from typing import Callable

from .types import GenerateOptions
from .class_diagram.types import SkippedLine
from .class_diagram.parser import parse_class_diagram
from .class_diagram.resolver import pluralize, resolve_relationships
from .csharp.types import CSharpTarget, DEFAULTS
from .csharp.emitter import emit_model
from .csharp.scaffold import scaffold_files

__all__ = [
    "generate_entities",
    "translate",
    "build_target",
    "scaffold_files",
    "pluralize",
    "GenerateOptions",
    "SkippedLine",
    "DEFAULTS",
]


def build_target(options: GenerateOptions | None = None) -> CSharpTarget:
    """Resolve generate options against the defaults."""
    if options is None:
        options = GenerateOptions()
    return CSharpTarget(
        namespace=options.namespace or DEFAULTS["namespace"],
        context_name=options.context_name or DEFAULTS["context_name"],
        base_class=options.base_class or DEFAULTS["base_class"],
        class_attribute=options.class_attribute or DEFAULTS["class_attribute"],
        project_name=options.project_name or DEFAULTS["project_name"],
        target_framework=options.target_framework or DEFAULTS["target_framework"],
        model_dir=options.model_dir or DEFAULTS["model_dir"],
    )


def translate(
    text: str,
    options: GenerateOptions | None = None,
    on_skip: Callable[[SkippedLine], None] | None = None,
) -> dict[str, str]:
    """Translate class diagram text into `{file name: C# source}`.

    Pure and deterministic. Malformed constructs are dropped, never raised;
    pass `on_skip` to be told about them.
    """
    diagram = parse_class_diagram(text, on_skip)
    registry = resolve_relationships(diagram, on_skip)
    return emit_model(registry, build_target(options))


def generate_entities(
    text: str | None,
    options: GenerateOptions | None = None,
    on_skip: Callable[[SkippedLine], None] | None = None,
) -> dict[str, str]:
    """Reject empty input, then translate.

    Raises:
        ValueError: if `text` is None or blank.
    """
    if text is None or not text.strip():
        raise ValueError("Empty class diagram")
    return translate(text, options, on_skip)
