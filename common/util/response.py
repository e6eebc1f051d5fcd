from django.http import HttpResponse, JsonResponse

import json
from functools import wraps


__all__ = (
    "success",
    "error",
    "plain_error",
    "requires_method",
    "requires_data",
)


def success(data=None, status=200):
    if data is None:
        data = {"success": True}
    return JsonResponse(data, status=status, safe=False)


def error(msg, status=200):
    return JsonResponse({"success": False, "error": msg}, status=status)


def plain_error(msg, status):
    return HttpResponse(msg, status=status, content_type="text/plain; charset=utf-8")


def requires_method(*methods: str):
    methods = list(map(str.upper, methods))  # type: ignore

    def decorator(func):
        @wraps(func)
        def wrapper(req, *args, **kwargs):
            if req.method.upper() not in methods:
                resp = plain_error("Method not allowed", status=405)
                resp["Allow"] = ", ".join(methods)
                return resp

            return func(req, *args, **kwargs)

        return wrapper

    return decorator


def requires_data(func):
    @wraps(func)
    def wrapper(req, *args, **kwargs):
        try:
            data = json.loads(req.body.decode("utf-8"))
        except (json.decoder.JSONDecodeError, UnicodeDecodeError):
            return error("Invalid JSON data")

        return func(req, *args, data=data, **kwargs)

    return wrapper
