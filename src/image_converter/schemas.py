"""Pydantic schemas for runtime validation of traversal inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class TraversalConfig(BaseModel):
    """Validated input for a directory or single-file traversal."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: Path
    from_suffix: str
    to_suffix: str
    quit_on_error: bool = True
    delete_original: bool = False

    @field_validator("from_suffix", "to_suffix")
    @classmethod
    def _validate_token(cls, value: str) -> str:
        token = value.strip()
        if not token:
            raise ValueError("suffix tokens cannot be empty.")
        return token
