"""Security.txt fields: one variant per recognized name plus Extension."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, TypeAlias

from pydantic import AnyUrl

from securitytxt.domain.value_objects import FieldName, LanguageTag


@dataclass(frozen=True)
class Acknowledgments:
    """Link to a page recognizing security researchers."""

    field_name: ClassVar[FieldName] = FieldName.ACKNOWLEDGMENTS
    url: AnyUrl


@dataclass(frozen=True)
class Canonical:
    """URL at which this file is canonically published."""

    field_name: ClassVar[FieldName] = FieldName.CANONICAL
    url: AnyUrl


@dataclass(frozen=True)
class Contact:
    """Address for reporting security vulnerabilities."""

    field_name: ClassVar[FieldName] = FieldName.CONTACT
    url: AnyUrl


@dataclass(frozen=True)
class Encryption:
    """Link to a key for encrypted communication."""

    field_name: ClassVar[FieldName] = FieldName.ENCRYPTION
    url: AnyUrl


@dataclass(frozen=True)
class Expires:
    """Date after which the file is stale; keeps the offset it was written with."""

    field_name: ClassVar[FieldName] = FieldName.EXPIRES
    timestamp: datetime


@dataclass(frozen=True)
class Hiring:
    """Link to security-related job openings."""

    field_name: ClassVar[FieldName] = FieldName.HIRING
    url: AnyUrl


@dataclass(frozen=True)
class Policy:
    """Link to the vulnerability disclosure policy."""

    field_name: ClassVar[FieldName] = FieldName.POLICY
    url: AnyUrl


@dataclass(frozen=True)
class PreferredLanguages:
    """Languages the security team prefers, in file order."""

    field_name: ClassVar[FieldName] = FieldName.PREFERRED_LANGUAGES
    languages: tuple[LanguageTag, ...]


@dataclass(frozen=True)
class Extension:
    """Field with an unrecognized name, kept verbatim."""

    name: str
    value: str


UrlField: TypeAlias = Acknowledgments | Canonical | Contact | Encryption | Hiring | Policy

Field: TypeAlias = UrlField | Expires | PreferredLanguages | Extension
