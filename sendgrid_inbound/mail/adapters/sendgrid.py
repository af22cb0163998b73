import hmac
import logging

from sendgrid_inbound.conf import get_setting
from sendgrid_inbound.mail.adapters.base import BaseAdapter
from sendgrid_inbound.mail.encoding import FALLBACK_ENCODING
from sendgrid_inbound.mail.normalizer import normalize

logger = logging.getLogger("sendgrid_inbound")


class SendgridAdapter(BaseAdapter):
    """
    Adapter for SendGrid Inbound Parse webhooks.

    SendGrid posts each parsed email as multipart/form-data. Text parts keep
    the charset of the original message, which SendGrid reports separately
    in the ``charsets`` field.

    Expected POST fields:
        - to, cc, from: Address-list headers
        - subject, text, html, headers: Message content
        - envelope: JSON object with the SMTP "to" and "from" lists
        - charsets: JSON object mapping field name to charset
        - spam_score, spam_report: SpamAssassin results
        - attachments: Number of attachments
        - attachment1 .. attachmentN: Uploaded file attachments
        - attachment-info: JSON object with the original filename and
          content type of each attachment
    """

    @property
    def name(self) -> str:
        return "sendgrid"

    def verify_request(self, request) -> bool:
        """
        Verify the SendGrid inbound webhook.

        Inbound Parse does not sign its requests, so the destination URL
        configured in SendGrid carries a shared secret, either as the
        ``token`` query parameter or the X-Sendgrid-Inbound-Token header.
        """
        expected_token = get_setting("SENDGRID_INBOUND_TOKEN")
        if not expected_token:
            logger.warning(
                "SendGrid inbound token not configured; rejecting request. "
                "Set SENDGRID_INBOUND['SENDGRID_INBOUND_TOKEN'] in settings."
            )
            return False

        request_token = request.headers.get("X-Sendgrid-Inbound-Token", "")
        if not request_token:
            request_token = request.GET.get("token", "")

        if not request_token:
            logger.warning("SendGrid webhook missing inbound token")
            return False

        return hmac.compare_digest(request_token.encode("utf-8"), expected_token.encode("utf-8"))

    def raw_params(self, request) -> dict:
        """
        Collect the webhook's form fields and uploads into one mapping.

        The form is decoded as ISO-8859-1, which maps each byte to one code
        point, so every text value can be turned back into the exact bytes
        SendGrid sent.
        """
        request.encoding = FALLBACK_ENCODING

        params = {}
        for key in request.POST:
            params[key] = request.POST.get(key).encode(FALLBACK_ENCODING)
        for key in request.FILES:
            params[key] = request.FILES.get(key)
        return params

    @classmethod
    def normalize_params(cls, params: dict) -> dict:
        return normalize(params)
