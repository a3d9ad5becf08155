#!/usr/bin/env python3
"""
String Context Schemas

Where a string was found, as a discriminated union keyed on ``kind``. Each
variant carries its own payload; the only shared behaviour is the category
name projection in context_category().

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter

from .base import StringTraceModel


class FileStringContext(StringTraceModel):
    kind: Literal["file_string"] = "file_string"
    offset: int | None = Field(None, ge=0, description="Byte offset within the file")


class ImportContext(StringTraceModel):
    kind: Literal["import"] = "import"
    library: str = Field(..., description="Imported library or module")


class ExportContext(StringTraceModel):
    kind: Literal["export"] = "export"
    symbol: str = Field(..., description="Exported symbol name")


class ResourceContext(StringTraceModel):
    kind: Literal["resource"] = "resource"
    resource_type: str = Field(..., description="Resource type (icon, string table, ...)")


class SectionContext(StringTraceModel):
    kind: Literal["section"] = "section"
    section_name: str


class MetadataContext(StringTraceModel):
    kind: Literal["metadata"] = "metadata"
    field: str = Field(..., description="Metadata field the string came from")


class PathContext(StringTraceModel):
    kind: Literal["path"] = "path"
    path_type: str = Field(..., description="absolute, relative or unc")


class UrlContext(StringTraceModel):
    kind: Literal["url"] = "url"
    protocol: str | None = None


class RegistryContext(StringTraceModel):
    kind: Literal["registry"] = "registry"
    hive: str | None = None


class CommandContext(StringTraceModel):
    kind: Literal["command"] = "command"
    command_type: str = Field(..., description="shell, cmd, powershell, ...")


class OtherContext(StringTraceModel):
    kind: Literal["other"] = "other"
    category: str = Field(..., min_length=1)


StringContext = Annotated[
    Union[
        FileStringContext,
        ImportContext,
        ExportContext,
        ResourceContext,
        SectionContext,
        MetadataContext,
        PathContext,
        UrlContext,
        RegistryContext,
        CommandContext,
        OtherContext,
    ],
    Field(discriminator="kind"),
]

_context_adapter: TypeAdapter = TypeAdapter(StringContext)


def parse_context(data: dict[str, Any]) -> StringContext:
    """Build the right context variant from a plain dict"""
    return _context_adapter.validate_python(data)


def context_category(context: StringContext) -> str:
    """Category name a context contributes to its string's entry"""
    if isinstance(context, OtherContext):
        return context.category
    return context.kind
