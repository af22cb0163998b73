import django.dispatch

# Inbound email signals
inbound_email_normalized = django.dispatch.Signal()  # sender=adapter class, adapter_name, params
