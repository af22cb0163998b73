from django.urls import path

from sendgrid_inbound.views import inbound

app_name = "sendgrid_inbound"

urlpatterns = [
    path("inbound/<str:adapter_name>/", inbound.inbound_webhook, name="inbound_webhook"),
]
