"""
Duplex microwave link reconstruction.

Groups unidirectional permit records into physical point-to-point links,
classifies their RF architecture and derives display metrics.
"""
from radiolinks.data.schemas import Endpoint, UnidirectionalLinkRecord
from radiolinks.links.builder import (
    DuplexLink,
    build_duplex_links,
    find_link_for_record,
)
from radiolinks.links.classifier import LinkArchitecture

__version__ = "0.1.0"

__all__ = [
    'Endpoint',
    'UnidirectionalLinkRecord',
    'DuplexLink',
    'LinkArchitecture',
    'build_duplex_links',
    'find_link_for_record',
]
