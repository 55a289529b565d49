from .diagrams import IdFactory, content_hash_id, extract_diagram_blocks
from .scanner import ScanReport, scan_code_blocks, scan_document

__all__ = [
    "scan_code_blocks",
    "scan_document",
    "ScanReport",
    "extract_diagram_blocks",
    "content_hash_id",
    "IdFactory",
]
