from .document_store import DocumentStore
from .jsonpath_parser import IndexSegment, JSONPathParser, KeySegment, PathSegment
from .tree_resolver import JSONValue, TreeResolver

__all__ = [
    'DocumentStore',
    'IndexSegment',
    'JSONPathParser',
    'JSONValue',
    'KeySegment',
    'PathSegment',
    'TreeResolver',
]
