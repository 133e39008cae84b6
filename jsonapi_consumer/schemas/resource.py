"""Pydantic schemas for JSON:API v1.1 documents received from upstream."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel


class JSONAPIResource(BaseModel):
    """Resource object with attributes and relationships."""

    type: str
    id: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
    relationships: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Any]] = None
    meta: Optional[Dict[str, Any]] = None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document holding one resource or none."""

    data: Optional[JSONAPIResource] = None
    included: Optional[List[JSONAPIResource]] = None
    meta: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Any]] = None


class JSONAPICollectionDocument(BaseModel):
    """Top-level JSON:API document for a resource collection."""

    data: List[JSONAPIResource]
    included: Optional[List[JSONAPIResource]] = None
    meta: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Union[str, Dict[str, Any], None]]] = None


class JSONAPIErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    errors: List[Dict[str, Any]]
