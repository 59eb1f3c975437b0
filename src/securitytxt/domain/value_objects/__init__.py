"""Domain value objects."""

from securitytxt.domain.value_objects.field_name import FieldName
from securitytxt.domain.value_objects.language_tag import LanguageTag

__all__ = [
    "FieldName",
    "LanguageTag",
]
