"""Fused field resources."""

from jirafields.resources.fusion import (
    HybridResourceBuilder,
    build_path_index,
    fuse_field_definitions,
    resource_uri,
)
from jirafields.resources.handler import ResourceHandler

__all__ = [
    "HybridResourceBuilder",
    "ResourceHandler",
    "build_path_index",
    "fuse_field_definitions",
    "resource_uri",
]
