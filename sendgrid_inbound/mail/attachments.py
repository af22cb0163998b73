import json
import logging
import re

from sendgrid_inbound.mail.inbound_params import Attachment

logger = logging.getLogger("sendgrid_inbound")

COUNT_FIELD = "attachments"
INFO_FIELD = "attachment-info"
LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def attachment_count(value) -> int:
    """
    Parse the attachment count field from its leading digits, so "2.0" and
    "2 files" count as 2. Anything without leading digits, or negative,
    counts as zero.
    """
    match = LEADING_INTEGER.match(str(value)) if value is not None else None
    if match is None:
        return 0
    return max(int(match.group(1)), 0)


def attachment_info(value) -> dict:
    """
    Decode the ``attachment-info`` JSON field, a mapping of
    ``"attachment{i}"`` to ``{"filename", "name", "type"}``.
    """
    if not value:
        return {}
    try:
        info = json.loads(value)
    except (json.JSONDecodeError, TypeError) as exc:
        logger.debug(f"Ignoring undecodable attachment-info: {exc}")
        return {}
    return info if isinstance(info, dict) else {}


def extract_attachments(params: dict) -> list:
    """
    Pop the attachment fields out of ``params`` and return them in index order.

    Consumes the count field, every ``attachment{i}`` upload and the
    ``attachment-info`` metadata, so none of them survive into the
    normalized output. The filename reported in ``attachment-info`` wins
    over the upload's own name when it is present and non-empty.
    """
    count = attachment_count(params.pop(COUNT_FIELD, None))
    info = attachment_info(params.pop(INFO_FIELD, None))

    attachments = []
    for i in range(1, count + 1):
        key = f"attachment{i}"
        uploaded_file = params.pop(key, None)
        if uploaded_file is None:
            logger.warning(f"SendGrid reported {count} attachment(s) but {key} is missing")
            continue

        filename = uploaded_file.name
        meta = info.get(key)
        if isinstance(meta, dict) and meta.get("filename"):
            filename = meta["filename"]

        attachments.append(Attachment(content=uploaded_file, filename=filename))

    return attachments
