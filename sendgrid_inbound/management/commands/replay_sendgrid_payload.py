import json

from django.core.management.base import BaseCommand, CommandError

from sendgrid_inbound.mail.adapters import SendgridAdapter
from sendgrid_inbound.mail.inbound_params import Attachment


class Command(BaseCommand):
    help = (
        "Run a captured SendGrid Inbound Parse payload (a JSON object of form "
        "fields) through the normalizer and print the result."
    )

    def add_arguments(self, parser):
        parser.add_argument("path", help="JSON file holding the webhook's form fields.")
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="Indentation of the printed JSON (default: 2)",
        )

    def handle(self, *args, **options):
        path = options["path"]

        try:
            with open(path, encoding="utf-8") as fh:
                payload = json.load(fh)
        except OSError as exc:
            raise CommandError(f"Could not read {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CommandError(f"{path} is not valid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise CommandError(f"{path} must contain a JSON object of form fields.")

        params = {
            key: value.encode("utf-8") if isinstance(value, str) else value
            for key, value in payload.items()
        }
        normalized = SendgridAdapter.normalize_params(params)

        self.stdout.write(
            json.dumps(normalized, indent=options["indent"], default=self._encode, ensure_ascii=False)
        )

    @staticmethod
    def _encode(value):
        if isinstance(value, Attachment):
            return value.filename
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
