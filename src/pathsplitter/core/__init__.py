"""Core processing algorithms for pathsplitter.

This module contains the decomposition engine and the document actions
built on it:

- Tokenizer (path data to tokens)
- Segment interpreter (tokens to subpaths with bounds and polygons)
- Clustering (subpaths to compound shapes)
- Serialization (compound shapes back to path data)
- Identifier allocation and document processing

The engine is:
- Stateless (all state lives in one call)
- Pure (no side effects)
- Deterministic (stable ordering for equal areas)

Key functions:
- decompose: Split path data into one string per shape
- scan: Tokenize path data
- point_in_polygon: Test if point is inside polygon

Key classes:
- SegmentInterpreter: Walks tokens and collects subpaths
- ClusteringEngine: Groups subpaths into outer contours with holes
- IdAllocator: Deterministic identifier allocation
- DocumentProcessor: Applies separation to SVG documents
"""

from pathsplitter.core.clustering import ClusteringEngine, cluster_subpaths
from pathsplitter.core.decomposer import decompose, decompose_clusters, is_compound
from pathsplitter.core.geometry import bbox_area, bbox_contains, point_in_polygon
from pathsplitter.core.ids import IdAllocator, next_free_id
from pathsplitter.core.interpreter import PARAM_COUNTS, SegmentInterpreter, collect_subpaths
from pathsplitter.core.processor import DocumentProcessor, SeparationResult
from pathsplitter.core.serializer import format_number, serialize_clusters
from pathsplitter.core.tokenizer import ScanResult, ScanStatus, scan, tokenize

__all__ = [
    # Clustering
    "ClusteringEngine",
    # Processor classes
    "DocumentProcessor",
    "IdAllocator",
    "PARAM_COUNTS",
    "ScanResult",
    "ScanStatus",
    "SegmentInterpreter",
    "SeparationResult",
    # Geometry functions
    "bbox_area",
    "bbox_contains",
    "cluster_subpaths",
    "collect_subpaths",
    "decompose",
    "decompose_clusters",
    "format_number",
    "is_compound",
    "next_free_id",
    "point_in_polygon",
    "scan",
    "serialize_clusters",
    "tokenize",
]
