"""
unity_markup – validation of Unity markup, XML-like documents encoded as JSON.
"""
__version__ = "1.0.0"

from .result import UnityError, ValidationError, ValidationResult
from .validator import validate, validate_document, validate_file
from .xml_name import is_valid_name as is_valid_xml_name

__all__ = [
    "UnityError",
    "ValidationError",
    "ValidationResult",
    "is_valid_xml_name",
    "validate",
    "validate_document",
    "validate_file",
]
