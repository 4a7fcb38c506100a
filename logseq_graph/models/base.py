"""Base Pydantic models for MCP tool input validation.

This module defines base models that provide common validation patterns
for page and block operations. Other input models inherit from these bases.

Base Models:
- StrictInput: Rejects fields a tool does not recognize
- BasePageInput: Common validation for page-name based operations
- BaseBlockInput: Common validation for block-UUID based operations
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def require_text(value: str, label: str) -> str:
    """Strip ``value`` and reject it when nothing is left.

    Args:
        value: Raw string supplied by the caller.
        label: Human-readable field name used in the error message.

    Returns:
        The stripped string.

    Raises:
        ValueError: If the string is empty or only whitespace.
    """
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(f"{label} cannot be empty.")
    return cleaned


class StrictInput(BaseModel):
    """Root of every tool input model.

    Unknown fields are rejected so that typos such as ``journalOnly`` surface as
    validation errors instead of being silently ignored.
    """

    model_config = ConfigDict(extra="forbid")


class BasePageInput(StrictInput):
    """Base model for operations addressed by page name."""

    name: str = Field(
        min_length=1,
        description=(
            "Page name (case-insensitive in Logseq). "
            "Namespaced pages use slashes, e.g. 'projects/alpha'."
        ),
        examples=["Meeting Notes", "projects/alpha", "Oct 27th, 2025"]
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject blank page names."""
        return require_text(v, "Page name")


class BaseBlockInput(StrictInput):
    """Base model for operations addressed by block UUID."""

    id: str = Field(
        min_length=1,
        description="Block UUID, e.g. '6571b7f2-8c1e-4a8e-9d7f-3f1f0b5a2c11'.",
        examples=["6571b7f2-8c1e-4a8e-9d7f-3f1f0b5a2c11"]
    )

    @field_validator('id')
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Reject blank block identifiers."""
        return require_text(v, "Block UUID")
