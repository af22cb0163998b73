import logging
from email import errors, policy
from typing import Optional

from sendgrid_inbound.mail.inbound_params import Address

logger = logging.getLogger("sendgrid_inbound")


def parse_address_list(value: Optional[str]) -> list:
    """
    Parse a comma-delimited address-list field into Address objects.

    Accepts bare mailboxes, ``Name <mailbox>``, ``<mailbox>`` and quoted
    display names that contain commas. Source order is kept and nothing is
    deduplicated.

    A field the header parser cannot make sense of, or one it parses only
    by recovering from a structural defect (an unclosed angle bracket, a
    mailbox without a domain, ...), yields an empty list so that the rest
    of the message can still be processed.
    """
    if not value or not value.strip():
        return []

    try:
        header = policy.default.header_factory("to", value)
    except (errors.HeaderParseError, ValueError, IndexError, AttributeError) as exc:
        # the stdlib parser can trip over truncated input instead of
        # recording a defect, e.g. "Foo <" or "a@["
        logger.debug(f"Unparseable address list {value!r}: {exc}")
        return []

    invalid = [d for d in header.defects if isinstance(d, errors.InvalidHeaderDefect)]
    if invalid:
        logger.debug(f"Discarding malformed address list {value!r}: {invalid[0]}")
        return []

    return [
        Address(
            display_name=_clean(addr.display_name) or None,
            mailbox=_clean(addr.addr_spec),
        )
        for addr in header.addresses
    ]


def _clean(text: str) -> str:
    """Replace lone surrogates left by undecodable encoded words."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def format_addresses(addresses) -> list:
    """Return the formatted string of each address, in order."""
    return [address.formatted for address in addresses]
