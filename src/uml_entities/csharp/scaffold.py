from __future__ import annotations

from .types import CSharpTarget

# ============================================================================
# Project scaffold
#
# Static companions of the generated model: the abstract entity base class
# and an SDK-style project file that builds the model as a library.
# ============================================================================

DEVEXPRESS_VERSION = "24.2.6"
EF_CORE_VERSION = "8.0.11"


def scaffold_files(target: CSharpTarget) -> dict[str, str]:
    """`{file name: source}` for the scaffold, keyed like `emit_model`.

    `.cs` files belong in the model directory, everything else at the root.
    """
    return {
        f"{target.base_class}.cs": base_entity_source(target),
        f"{target.project_name}.csproj": project_file_source(target),
    }


def base_entity_source(target: CSharpTarget) -> str:
    return f"""\
using DevExpress.ExpressApp;
using System;
using System.Collections.Generic;
using System.ComponentModel;
using System.ComponentModel.DataAnnotations;

namespace {target.namespace}
{{
    public abstract class {target.base_class} : IXafEntityObject
    {{
        [Key, Browsable(false)]
        public virtual int Id {{ get; set; }}
        public virtual void OnCreated() {{ }}
        public virtual void OnSaving() {{ }}
        public virtual void OnLoaded() {{ }}
    }}
}}
"""


def project_file_source(target: CSharpTarget) -> str:
    return f"""\
<Project Sdk="Microsoft.NET.Sdk">

  <PropertyGroup>
    <TargetFramework>{target.target_framework}</TargetFramework>
    <ImplicitUsings>enable</ImplicitUsings>
    <Nullable>enable</Nullable>
    <RootNamespace>{target.project_name}</RootNamespace>
  </PropertyGroup>

  <ItemGroup>
    <PackageReference Include="DevExpress.ExpressApp" Version="{DEVEXPRESS_VERSION}" />
    <PackageReference Include="Microsoft.EntityFrameworkCore" Version="{EF_CORE_VERSION}" />
  </ItemGroup>

</Project>
"""
