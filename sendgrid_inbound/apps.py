import logging

from django.apps import AppConfig

logger = logging.getLogger("sendgrid_inbound")


class SendgridInboundConfig(AppConfig):
    name = "sendgrid_inbound"
    verbose_name = "SendGrid Inbound Parse"

    def ready(self):
        from sendgrid_inbound.conf import get_setting

        if get_setting("INBOUND_EMAIL_ENABLED") and not get_setting("SENDGRID_INBOUND_TOKEN"):
            logger.warning(
                "Inbound email is enabled but SENDGRID_INBOUND_TOKEN is not set; "
                "every webhook request will be rejected."
            )
