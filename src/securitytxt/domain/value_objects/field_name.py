"""Recognized security.txt field names."""

from enum import StrEnum


class FieldName(StrEnum):
    """Lower-cased names of the fields with a defined value grammar."""

    ACKNOWLEDGMENTS = "acknowledgments"
    CANONICAL = "canonical"
    CONTACT = "contact"
    ENCRYPTION = "encryption"
    EXPIRES = "expires"
    HIRING = "hiring"
    POLICY = "policy"
    PREFERRED_LANGUAGES = "preferred-languages"
