import logging

from django.http import HttpResponse, HttpResponseBadRequest, HttpResponseForbidden
from django.http.multipartparser import MultiPartParserError
from django.utils.translation import gettext as _
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from sendgrid_inbound.conf import get_setting
from sendgrid_inbound.mail.adapters import get_adapter
from sendgrid_inbound.signals import inbound_email_normalized

logger = logging.getLogger("sendgrid_inbound")


@csrf_exempt
@require_POST
def inbound_webhook(request, adapter_name):
    """
    Receive inbound email webhooks and hand the normalized payload to
    whoever listens on the ``inbound_email_normalized`` signal.

    This endpoint is not behind session authentication since SendGrid
    POSTs to it directly; the adapter checks the shared token instead.

    URL pattern: /inbound/<adapter_name>/

    Returns:
        200 OK on success, 400/403 on error.
    """
    if not get_setting("INBOUND_EMAIL_ENABLED"):
        logger.warning(
            f"Inbound email webhook called but feature is disabled "
            f"(adapter={adapter_name})"
        )
        return HttpResponseBadRequest(_("Inbound email processing is disabled."))

    try:
        adapter = get_adapter(adapter_name)
    except ValueError as exc:
        logger.error(f"Unknown inbound email adapter: {adapter_name}")
        return HttpResponseBadRequest(str(exc))

    if not adapter.verify_request(request):
        logger.warning(
            f"Inbound email webhook verification failed "
            f"(adapter={adapter_name}, ip={request.META.get('REMOTE_ADDR')})"
        )
        return HttpResponseForbidden(_("Request verification failed."))

    try:
        params = adapter.parse_request(request)
    except MultiPartParserError as exc:
        logger.error(
            f"Failed to parse inbound email webhook "
            f"(adapter={adapter_name}): {exc}"
        )
        return HttpResponseBadRequest(f"Failed to parse request: {exc}")

    logger.info(
        f"Accepted inbound email (adapter={adapter_name}, "
        f"to={len(params['to'])}, cc={len(params['cc'])}, bcc={len(params['bcc'])}, "
        f"attachments={len(params['attachments'])})"
    )
    inbound_email_normalized.send(
        sender=type(adapter),
        adapter_name=adapter_name,
        params=params,
    )

    return HttpResponse("OK", status=200)
