"""Aggregated security.txt document."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import AnyUrl

from securitytxt.domain.value_objects import LanguageTag


@dataclass(frozen=True)
class SecurityTxt:
    """Validated security.txt contents.

    Sequences keep the order in which their fields appeared in the file.
    ``contacts`` always holds at least one URL and ``expires`` is the single
    Expires value.
    """

    contacts: tuple[AnyUrl, ...]
    expires: datetime
    acknowledgments: tuple[AnyUrl, ...] = ()
    canonical: tuple[AnyUrl, ...] = ()
    encryptions: tuple[AnyUrl, ...] = ()
    hiring: tuple[AnyUrl, ...] = ()
    policies: tuple[AnyUrl, ...] = ()
    preferred_languages: tuple[LanguageTag, ...] = ()
    extensions: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        if not self.contacts:
            raise ValueError("SecurityTxt requires at least one contact")

    @property
    def primary_contact(self) -> AnyUrl:
        return self.contacts[0]
