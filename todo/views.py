from django.http import HttpResponse
from django.shortcuts import redirect
from django.views.decorators.csrf import csrf_exempt

from common.views import render
from .models import Todo

import logging


_log = logging.getLogger(__name__)


def index(req):
    todo = Todo.objects.order_by("-id").first()
    return render(req, "todo/index.html", {"todos": [todo.serialize()] if todo is not None else []})


@csrf_exempt
def change(req):
    # anything but a form post is ignored
    if req.method != "POST":
        return HttpResponse()

    todo = Todo.objects.create(title=req.POST.get("title", ""))
    _log.info(f"Saved todo {todo.id}: {todo.title!r}")

    resp = redirect("todo_index")
    resp.status_code = 303
    return resp
