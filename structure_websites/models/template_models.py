# structure_websites/models/template_models.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ApplyTemplateRequest(BaseModel):
    template_key: str = Field(..., description="Template name; unique key in structure_templates")
    documents: List[Optional[Dict[str, Any]]] = Field(
        default_factory=list,
        description="Example documents; values are erased to a structural skeleton",
    )
    target_field: Optional[str] = Field(
        None,
        description="db_clients flag field to match (default 'structure_template')",
    )


class ReconcileResult(BaseModel):
    tenants: List[str] = Field(default_factory=list)
    updated_count: int = 0
    deleted_count: int = 0


class ApplyTemplateResult(BaseModel):
    template_key: str
    target_field: str
    affected_clients: List[str] = Field(default_factory=list)
    updated_documents: int = 0
    deleted_documents: int = 0
    message: str = ""
