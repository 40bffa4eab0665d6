"""Descriptive parameter metadata for external introspection."""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, Field


class ParamSpec(BaseModel):
    """Metadata describing a single action parameter."""

    description: Optional[str] = Field(
        default=None,
        description="Human-readable description of the parameter"
    )
    required: bool = Field(
        default=False,
        description="Whether callers are expected to supply the parameter"
    )
    default_value: Any = Field(
        default=None,
        description="Value a wizard may offer when nothing is supplied"
    )


ParamMeta = Dict[str, ParamSpec]


def normalize_params_meta(
    meta: Optional[Mapping[str, Union[ParamSpec, Mapping[str, Any]]]]
) -> Optional[ParamMeta]:
    """Coerce plain mappings into ``ParamSpec`` instances."""
    if meta is None:
        return None
    return {
        name: spec if isinstance(spec, ParamSpec) else ParamSpec.model_validate(spec)
        for name, spec in meta.items()
    }
