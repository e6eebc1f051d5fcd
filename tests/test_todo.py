import pytest

from todo.models import Todo

pytestmark = [pytest.mark.django_db, pytest.mark.urls("todo.urls")]


@pytest.fixture(autouse=True)
def todo_variant(settings):
    settings.BOARD_VARIANT = "todo"


def test_index_without_todos(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"<li>" not in resp.content
    assert b'action="/change"' in resp.content


def test_index_shows_only_latest(client):
    Todo.objects.create(title="buy milk")
    Todo.objects.create(title="walk dog")

    resp = client.get("/")
    assert resp.status_code == 200
    assert b"<li>walk dog</li>" in resp.content
    assert b"buy milk" not in resp.content


def test_change_inserts_and_redirects(client):
    resp = client.post("/change", {"title": "water plants"})
    assert resp.status_code == 303
    assert resp["Location"] == "/"
    assert Todo.objects.get().title == "water plants"

    assert b"<li>water plants</li>" in client.get("/").content


def test_change_without_title(client):
    resp = client.post("/change", {})
    assert resp.status_code == 303
    assert Todo.objects.get().title == ""


def test_change_ignores_other_methods(client):
    resp = client.get("/change", {"title": "sneaky"})
    assert resp.status_code == 200
    assert resp.content == b""
    assert Todo.objects.count() == 0


def test_titles_are_escaped(client):
    Todo.objects.create(title="<script>alert(1)</script>")
    assert b"<script>alert(1)</script>" not in client.get("/").content
