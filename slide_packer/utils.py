"""Utilities Module

Helper functions for loading measurement files and writing packing output.
"""
import json
import os
import re
from typing import Iterable, List

from .config import MAX_FILE_SIZE_MB
from .exceptions import FileSizeLimitExceededError, InvalidFileError, MeasurementParsingError
from .measurement import DeckInput, ElementMeasurement, SlideInput


def validate_json_path(json_path: str) -> None:
    """
    Validate measurement file exists and has correct extension.

    Args:
        json_path: Path to JSON file

    Raises:
        InvalidFileError: If file doesn't exist or has wrong extension
    """
    if not json_path:
        raise InvalidFileError("JSON path cannot be empty")

    if not os.path.exists(json_path):
        raise InvalidFileError(f"File does not exist: {json_path}")

    if not json_path.lower().endswith('.json'):
        raise InvalidFileError(f"File must have .json extension: {json_path}")


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "45.3 KB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def clean_filename(filename: str) -> str:
    """
    Clean filename for safe saving.

    Args:
        filename: Original filename

    Returns:
        Cleaned filename without extension
    """
    filename = os.path.basename(filename)
    name, _ = os.path.splitext(filename)

    name = re.sub(r'[^\w\s-]', '', name)
    name = re.sub(r'\s+', '_', name)

    if len(name) > 50:
        name = name[:50]

    return name or 'deck'


def check_file_size_limit(file_path: str, max_mb: float = MAX_FILE_SIZE_MB) -> float:
    """
    Check if file is within size limit.

    Args:
        file_path: Path to file
        max_mb: Maximum size in MB

    Returns:
        File size in MB

    Raises:
        FileSizeLimitExceededError: If file exceeds size limit
        InvalidFileError: If file size cannot be determined
    """
    try:
        size_mb = os.path.getsize(file_path) / (1024 * 1024)
    except OSError as e:
        raise InvalidFileError(f"Error checking file size: {str(e)}")

    if size_mb > max_mb:
        raise FileSizeLimitExceededError(size_mb, max_mb)
    return size_mb


def _read_json(json_path: str):
    validate_json_path(json_path)
    check_file_size_limit(json_path)
    try:
        with open(json_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidFileError(f"Invalid JSON in {json_path}: {e}")
    except UnicodeDecodeError as e:
        raise InvalidFileError(f"{json_path} is not UTF-8 text: {e.reason}")


def load_deck(json_path: str) -> DeckInput:
    """
    Load a deck (or a single slide) from a measurement JSON file.

    Args:
        json_path: Path to the JSON document written by the measuring host

    Returns:
        DeckInput

    Raises:
        InvalidFileError: If the file is missing, not JSON, or too large
        MeasurementParsingError: If the document has an unexpected shape
    """
    return DeckInput.from_dict(_read_json(json_path))


def load_measurements(json_path: str) -> List[ElementMeasurement]:
    """
    Load one slide's measurement list from a JSON file.

    Accepts a bare list or an object with a "measurements" key.

    Raises:
        InvalidFileError: If the file is missing, not JSON, or too large
        MeasurementParsingError: If a record is malformed
    """
    data = _read_json(json_path)
    if isinstance(data, dict) and "measurements" not in data:
        raise MeasurementParsingError("measurements", "missing")
    return list(SlideInput.from_dict(data).measurements)


def write_placements_json(output_path: str, slides: Iterable, title: str = "") -> str:
    """
    Write packed slides as a JSON document of placement commands.

    Args:
        output_path: Destination path
        slides: PackedSlide objects in deck order
        title: Optional deck title

    Returns:
        Path to the written file
    """
    document = {
        "title": title,
        "slides": [slide.to_dict() for slide in slides],
    }
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(document, f, ensure_ascii=False, indent=2)
    return output_path
