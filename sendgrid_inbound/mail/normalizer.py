from sendgrid_inbound.mail.addresses import format_addresses, parse_address_list
from sendgrid_inbound.mail.attachments import extract_attachments
from sendgrid_inbound.mail.charsets import normalize_charsets
from sendgrid_inbound.mail.encoding import repair_params
from sendgrid_inbound.mail.envelope import resolve_bcc


def build_spam_report(params: dict) -> dict:
    """Fold the flat spam fields into a single report mapping."""
    return {
        "report": params.get("spam_report"),
        "score": params.get("spam_score"),
    }


def normalize(params: dict) -> dict:
    """
    Turn a raw SendGrid Inbound Parse payload into the normalized mapping.

    ``params`` maps form field names to text values (``bytes`` in any
    encoding, or already-decoded ``str``), uploaded files, or None. It is
    not modified; the result is a new dict with the same keys minus the
    attachment side-channel fields, and with ``to``, ``cc``, ``bcc``,
    ``attachments``, ``charsets`` and ``spam_report`` replaced by their
    normalized forms. Every other field is passed through after its text
    has been decoded.

    Malformed fields fall back to empty values; nothing here raises for
    bad input data.
    """
    params = repair_params(params)
    attachments = extract_attachments(params)

    to = parse_address_list(params.get("to"))
    cc = parse_address_list(params.get("cc"))

    return {
        **params,
        "to": format_addresses(to),
        "cc": format_addresses(cc),
        "bcc": resolve_bcc(params.get("envelope"), to, cc),
        "attachments": attachments,
        "charsets": normalize_charsets(params.get("charsets")),
        "spam_report": build_spam_report(params),
    }
