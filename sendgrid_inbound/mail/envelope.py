import json
import logging
from typing import Optional

from sendgrid_inbound.mail.inbound_params import Envelope

logger = logging.getLogger("sendgrid_inbound")


def parse_envelope(value: Optional[str]) -> Optional[Envelope]:
    """
    Decode the ``envelope`` JSON field.

    Returns None when the field is absent, empty, not valid JSON, or does
    not decode to an object.
    """
    if not value:
        return None

    try:
        data = json.loads(value)
    except (json.JSONDecodeError, TypeError) as exc:
        logger.debug(f"Ignoring undecodable envelope {value!r}: {exc}")
        return None

    if not isinstance(data, dict):
        return None

    to = data.get("to")
    from_ = data.get("from")
    return Envelope(
        to=list(to) if isinstance(to, list) else [],
        from_=list(from_) if isinstance(from_, list) else [],
    )


def resolve_bcc(envelope_json: Optional[str], to, cc) -> list:
    """
    Recover blind-copy recipients from the SMTP envelope.

    The result is every envelope ``to`` entry, in order, whose exact string
    value is not the bare mailbox of a parsed To or Cc address. Entries the
    provider reports with a display name are never matched.
    """
    envelope = parse_envelope(envelope_json)
    if envelope is None:
        return []

    visible = {address.mailbox for address in [*to, *cc]}
    return [
        recipient for recipient in envelope.to
        if not (isinstance(recipient, str) and recipient in visible)
    ]
