from __future__ import annotations

from dataclasses import dataclass

# ============================================================================
# Generate options -- user-facing configuration
#
# Unset fields fall back to `csharp.types.DEFAULTS`.
# ============================================================================


@dataclass(slots=True)
class GenerateOptions:
    # C# namespace of every generated unit
    namespace: str | None = None
    # Name of the aggregate DbContext class (and its file)
    context_name: str | None = None
    # Base class of every entity
    base_class: str | None = None
    # Attribute placed on every entity declaration
    class_attribute: str | None = None
    # Project scaffold: project/assembly name and target framework
    project_name: str | None = None
    target_framework: str | None = None
    # Subdirectory receiving the generated .cs units
    model_dir: str | None = None
