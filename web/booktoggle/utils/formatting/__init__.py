"""Formatting utilities - JSON serialization and extended-JSON normalization"""
from .json_utils import (
    serialize_objectid, sanitize_mongo_document, normalize_record, normalize_records, parse_extended_date
)
