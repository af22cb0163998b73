import abc


class BaseAdapter(abc.ABC):
    """
    Abstract base class for inbound email adapters.

    An adapter turns a provider's webhook request into the normalized
    parameter mapping the inbound pipeline consumes, in two steps:
    ``raw_params`` lifts the request's fields into a plain dict and
    ``normalize_params`` reshapes that dict. Subclasses also decide how a
    request proves it really came from the provider.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Unique identifier for this adapter (e.g. 'sendgrid')."""
        ...

    @abc.abstractmethod
    def verify_request(self, request) -> bool:
        """Return True if the Django HttpRequest is authentic."""
        ...

    @abc.abstractmethod
    def raw_params(self, request) -> dict:
        """Return the request's form fields and uploads as one mapping."""
        ...

    @classmethod
    @abc.abstractmethod
    def normalize_params(cls, params: dict) -> dict:
        """Return the normalized form of a raw parameter mapping."""
        ...

    def parse_request(self, request) -> dict:
        """Parse a Django HttpRequest into a normalized parameter mapping."""
        return self.normalize_params(self.raw_params(request))
