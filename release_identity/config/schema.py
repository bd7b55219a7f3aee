from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


class ReleaseConfigSchema(BaseModel):
    tag_match: Optional[str] = Field(
        None,
        description="Glob passed to `git describe --match` when deciding if HEAD is a tagged release."
    )

    # Fallbacks used when git cannot answer
    fallback_version: Optional[str] = Field(
        None,
        description="Version reported for a repository without any tags."
    )
    fallback_commit: Optional[str] = Field(
        None,
        description="Commit hash reported when HEAD cannot be resolved."
    )

    # Names of the variables exported to the CI build provider
    permalink_env_var: Optional[str] = Field(
        None,
        min_length=1,
        description="Environment variable that receives the permalink."
    )
    version_env_var: Optional[str] = Field(
        None,
        min_length=1,
        description="Environment variable that receives the version."
    )

    class Config:
        extra = "forbid"
