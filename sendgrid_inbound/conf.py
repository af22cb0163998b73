from django.conf import settings


DEFAULTS = {
    # Webhook endpoint
    "INBOUND_EMAIL_ENABLED": False,
    # Shared secret carried in the Inbound Parse destination URL
    "SENDGRID_INBOUND_TOKEN": None,
}


def get_setting(name):
    """
    Retrieve a setting from the SENDGRID_INBOUND dict in Django settings,
    falling back to DEFAULTS if not provided.
    """
    user_settings = getattr(settings, "SENDGRID_INBOUND", {})
    return user_settings.get(name, DEFAULTS.get(name))
