from dataclasses import dataclass, field
from email.utils import quote
from typing import Optional

from django.core.files.uploadedfile import UploadedFile

# RFC 5322 specials; a display name containing any of them must be quoted.
SPECIALS = frozenset('()<>@,:;."[]')


@dataclass(frozen=True)
class Address:
    """A single parsed recipient from an address-list field."""

    display_name: Optional[str]
    mailbox: str

    @property
    def formatted(self) -> str:
        """Return "Name <mailbox>", or the bare mailbox when unnamed."""
        if not self.display_name:
            return self.mailbox
        name = self.display_name
        if not SPECIALS.isdisjoint(name):
            name = f'"{quote(name)}"'
        return f"{name} <{self.mailbox}>"


@dataclass(frozen=True)
class Envelope:
    """
    SMTP-level recipients and senders reported by SendGrid in the
    ``envelope`` field, independent of the visible To/Cc headers.
    """

    to: list = field(default_factory=list)
    from_: list = field(default_factory=list)


@dataclass
class Attachment:
    """An uploaded attachment together with the filename it should carry."""

    content: UploadedFile
    filename: str
