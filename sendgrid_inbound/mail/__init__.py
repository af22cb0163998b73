from sendgrid_inbound.mail.inbound_params import Address, Attachment, Envelope
from sendgrid_inbound.mail.normalizer import normalize

__all__ = [
    "Address",
    "Attachment",
    "Envelope",
    "normalize",
]
