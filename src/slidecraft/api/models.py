"""
Pydantic models for API requests and responses
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field


class OutlineRequest(BaseModel):
    topic: str = Field(..., min_length=1, description="Presentation topic")


class OutlineResponse(BaseModel):
    outlines: List[str]


class LayoutsRequest(BaseModel):
    outlines: List[str] = Field(..., description="Ordered outline points, one slide each")


class SlidesResponse(BaseModel):
    slides: List[Dict[str, Any]]


class ProjectCreateRequest(BaseModel):
    title: str = Field("Untitled", description="Project title")
    outlines: List[str] = Field(..., min_length=1, description="Ordered outline points")


class ProjectLayoutsRequest(BaseModel):
    theme: Optional[str] = Field(None, description="Theme name stored with the slides")


class ProjectResponse(BaseModel):
    project_id: str
    title: str
    outlines: List[str]
    slides: Optional[List[Dict[str, Any]]] = None
    theme_name: Optional[str] = None
    created_at: float
    updated_at: float
