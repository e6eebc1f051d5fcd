from django.conf import settings
from django.shortcuts import render as _render


def render(request, template_name, context=None, *args, **kwargs):
    if context is None:
        context = {}

    context["title"] = settings.BOARD_TITLES[settings.BOARD_VARIANT]
    return _render(request, template_name, context, *args, **kwargs)
