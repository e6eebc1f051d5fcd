from django.conf import settings

import logging
import requests


_log = logging.getLogger(__name__)


def header_embed():
    return dict({
        "title": "Headers",
        "fields": list(),
        "color": 0x0000ff
    })


def send_error_embed(req, exc):
    embeds = [
        {
            "title": f"{req.method} {req.path}",
            "description": str(exc),
            "color": 0xff0000,
        },
        header_embed()
    ]

    for name, value in req.headers.items():
        if len(embeds[-1]["fields"]) == 25:
            embeds.append(header_embed())
        embeds[-1]["fields"].append({"name": name, "value": value})

    resp = requests.post(settings.WEBHOOK_URL, json={"embeds": embeds}, timeout=10)
    resp.raise_for_status()


class ExceptionHandlingMiddleware:
    async_capable = False
    sync_capable = True

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, *args, **kwargs):
        return self.get_response(*args, **kwargs)

    def process_exception(self, req, exc):
        _log.exception(f"Unhandled error on {req.method} {req.path}", exc_info=exc)
        if not settings.WEBHOOK_URL:
            return

        try:
            send_error_embed(req, exc)
        except requests.RequestException as webhook_exc:
            _log.error(f"Failed to report error to webhook: {webhook_exc}")
