import json
import logging

logger = logging.getLogger("sendgrid_inbound")

NORMALIZED_CHARSET = "UTF-8"


def normalize_charsets(value) -> dict:
    """
    Decode the ``charsets`` JSON field and relabel every entry as UTF-8.

    Text fields have already been re-encoded by the time this runs, so the
    charset SendGrid originally reported for each field no longer applies.
    Only the set of field names is kept.
    """
    if not value:
        return {}
    try:
        charsets = json.loads(value)
    except (json.JSONDecodeError, TypeError) as exc:
        logger.debug(f"Ignoring undecodable charsets {value!r}: {exc}")
        return {}
    if not isinstance(charsets, dict):
        return {}
    return {field: NORMALIZED_CHARSET for field in charsets}
