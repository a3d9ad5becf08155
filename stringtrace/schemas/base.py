#!/usr/bin/env python3
"""
Base Pydantic Schemas for stringtrace Models

Every serialisable entity in stringtrace derives from StringTraceModel so that
hosts can export results to reports or persist them with a single JSON call.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class StringTraceModel(BaseModel):
    """
    Base model for all stringtrace data.

    Tracking models are mutated in place by the tracker on every occurrence,
    so assignment validation is left off.

    Example:
        >>> from stringtrace.schemas import Category
        >>> Category(name="url").to_json()
        '{"name":"url","confidence":1.0}'
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=False,
        use_enum_values=True,
    )

    def model_dump_safe(self, **kwargs) -> dict[str, Any]:
        """
        Safely dump model to dict, handling None values appropriately.

        Args:
            **kwargs: Additional arguments to pass to model_dump

        Returns:
            Dictionary representation of the model
        """
        return self.model_dump(exclude_none=True, **kwargs)

    def to_json(self, **kwargs) -> str:
        """
        Convert model to JSON string.

        Args:
            **kwargs: Additional arguments to pass to model_dump_json

        Returns:
            JSON string representation
        """
        return self.model_dump_json(exclude_none=True, **kwargs)
