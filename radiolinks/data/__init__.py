"""
Data loading and validation module.

Provides Pydantic schemas for radioline records and functions to load
them from CSV exports.
"""
from radiolinks.data.schemas import Endpoint, UnidirectionalLinkRecord, format_coordinate
from radiolinks.data.loaders import load_radiolines, records_from_dataframe

__all__ = [
    'Endpoint',
    'UnidirectionalLinkRecord',
    'format_coordinate',
    'load_radiolines',
    'records_from_dataframe',
]
