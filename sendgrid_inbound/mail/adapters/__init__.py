from sendgrid_inbound.mail.adapters.base import BaseAdapter
from sendgrid_inbound.mail.adapters.sendgrid import SendgridAdapter

ADAPTERS = {
    "sendgrid": SendgridAdapter,
}


def get_adapter(name: str) -> BaseAdapter:
    """
    Return an adapter instance by name.

    Raises ValueError if the adapter name is not recognized.
    """
    adapter_class = ADAPTERS.get(name)
    if adapter_class is None:
        raise ValueError(
            f"Unknown inbound email adapter: '{name}'. "
            f"Must be one of: {', '.join(ADAPTERS.keys())}"
        )
    return adapter_class()


__all__ = [
    "BaseAdapter",
    "SendgridAdapter",
    "ADAPTERS",
    "get_adapter",
]
