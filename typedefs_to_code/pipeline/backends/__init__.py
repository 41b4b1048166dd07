"""
Code generation backends.

Contains the target-specific code generators.
"""

from __future__ import annotations

from .base import CodeBackend
from .graphql_backend import GraphQLBackend
from .mongoose_backend import MongooseBackend
from .typescript_backend import TypeScriptBackend

__all__ = [
    "CodeBackend",
    "TypeScriptBackend",
    "MongooseBackend",
    "GraphQLBackend",
]
