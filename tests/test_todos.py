from datetime import datetime, timedelta, timezone

import pytest


def _create(client, headers, title="Acheter du lait", due=None, **extra):
    body = {"title": title, **extra}
    if due is not None:
        body["dueDate"] = due
    return client.post("/todo", json=body, headers=headers)


# ---------- Create ----------

def test_create_todo(client, register, in_days):
    headers = register("alice@example.com")
    due = in_days(2)

    res = _create(client, headers, due=due)

    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Todo created successfully"
    todo = body["todo"]
    assert todo["title"] == "Acheter du lait"
    assert todo["done"] is False
    assert datetime.fromisoformat(todo["dueDate"]) == datetime.fromisoformat(due)
    assert set(todo) == {"id", "title", "dueDate", "done", "userId", "createdAt", "updatedAt"}


def test_dates_are_rendered_in_display_timezone(client, register):
    headers = register("alice@example.com")
    res = _create(client, headers, due="2100-01-01T10:00:00+00:00")
    assert res.json()["todo"]["dueDate"].startswith("2100-01-01T15:30:00")
    assert res.json()["todo"]["dueDate"].endswith("+05:30")


def test_create_rejects_past_due_date(client, register, in_days):
    headers = register("alice@example.com")
    res = _create(client, headers, due=in_days(-1))
    assert res.status_code == 400
    assert res.json() == {"message": "dueDate must be in the future"}
    assert client.get("/todos", headers=headers).json() == {"todos": []}


def test_create_requires_due_date(client, register):
    headers = register("alice@example.com")
    res = _create(client, headers)
    assert res.status_code == 400
    assert res.json() == {"message": "dueDate is required"}


def test_create_requires_title(client, register, in_days):
    headers = register("alice@example.com")
    res = client.post("/todo", json={"dueDate": in_days(1)}, headers=headers)
    assert res.status_code == 400


def test_client_cannot_choose_owner(client, register, in_days):
    alice = register("alice@example.com")
    bob = register("bob@example.com", name="Bob")
    bob_id = _create(client, bob, due=in_days(1)).json()["todo"]["userId"]

    res = _create(client, alice, due=in_days(1), userId=bob_id, owner_id=bob_id)

    assert res.status_code == 201
    assert res.json()["todo"]["userId"] != bob_id
    assert len(client.get("/todos", headers=bob).json()["todos"]) == 1


# ---------- List ----------

def test_list_only_returns_own_todos(client, register, in_days):
    alice = register("alice@example.com")
    bob = register("bob@example.com", name="Bob")

    for i in range(3):
        _create(client, alice, title=f"alice-{i}", due=in_days(1))
        _create(client, bob, title=f"bob-{i}", due=in_days(1))

    alice_todos = client.get("/todos", headers=alice).json()["todos"]
    bob_todos = client.get("/todos", headers=bob).json()["todos"]

    assert [t["title"] for t in alice_todos] == ["alice-0", "alice-1", "alice-2"]
    assert [t["title"] for t in bob_todos] == ["bob-0", "bob-1", "bob-2"]
    assert len({t["userId"] for t in alice_todos}) == 1
    assert {t["userId"] for t in alice_todos}.isdisjoint({t["userId"] for t in bob_todos})


def test_list_pagination(client, register, in_days):
    headers = register("alice@example.com")
    for i in range(5):
        _create(client, headers, title=f"t{i}", due=in_days(1))

    res = client.get("/todos", params={"offset": 1, "limit": 2}, headers=headers)
    assert [t["title"] for t in res.json()["todos"]] == ["t1", "t2"]
    assert len(client.get("/todos", headers=headers).json()["todos"]) == 5


# ---------- Ownership ----------

def test_other_user_gets_not_found(client, register, in_days):
    alice = register("alice@example.com")
    bob = register("bob@example.com", name="Bob")
    todo = _create(client, alice, title="secret", due=in_days(1)).json()["todo"]
    missing_id = todo["id"] + 1000

    for owned, missing in (
        (client.get(f"/todo/{todo['id']}", headers=bob), client.get(f"/todo/{missing_id}", headers=bob)),
        (
            client.patch(f"/todo/edit/{todo['id']}", json={"title": "pwned", "done": True}, headers=bob),
            client.patch(f"/todo/edit/{missing_id}", json={"title": "pwned", "done": True}, headers=bob),
        ),
        (client.delete(f"/todo/remove/{todo['id']}", headers=bob), client.delete(f"/todo/remove/{missing_id}", headers=bob)),
    ):
        assert owned.status_code == missing.status_code == 404
        assert owned.json() == missing.json() == {"message": "Todo not found"}

    unchanged = client.get(f"/todo/{todo['id']}", headers=alice).json()["todo"]
    assert unchanged["title"] == "secret"
    assert unchanged["done"] is False


def test_non_numeric_id_is_not_found(client, register):
    headers = register("alice@example.com")
    assert client.get("/todo/abc", headers=headers).status_code == 404
    assert client.patch("/todo/edit/abc", json={}, headers=headers).status_code == 404
    assert client.delete("/todo/remove/abc", headers=headers).status_code == 404


@pytest.mark.parametrize("todo_id", ["9" * 30, str(2**63), "1_0", " 1", "-1", "²"])
def test_out_of_range_or_odd_ids_are_not_found(client, register, in_days, todo_id):
    headers = register("alice@example.com")
    _create(client, headers, due=in_days(1))

    for res in (
        client.get(f"/todo/{todo_id}", headers=headers),
        client.patch(f"/todo/edit/{todo_id}", json={"done": True}, headers=headers),
        client.delete(f"/todo/remove/{todo_id}", headers=headers),
    ):
        assert res.status_code == 404
        assert res.json() == {"message": "Todo not found"}


def test_largest_id_is_accepted(client, register):
    headers = register("alice@example.com")
    assert client.get(f"/todo/{2**63 - 1}", headers=headers).status_code == 404


# ---------- Edit ----------

def test_partial_update(client, register, in_days):
    headers = register("alice@example.com")
    todo = _create(client, headers, title="Lire", due=in_days(3)).json()["todo"]

    res = client.patch(f"/todo/edit/{todo['id']}", json={"done": True}, headers=headers)

    assert res.status_code == 200
    assert res.json()["message"] == "Todo updated successfully"
    updated = res.json()["todo"]
    assert updated["done"] is True
    assert updated["title"] == "Lire"
    assert updated["dueDate"] == todo["dueDate"]
    assert datetime.fromisoformat(updated["updatedAt"]) >= datetime.fromisoformat(todo["updatedAt"])


def test_update_due_date(client, register, in_days):
    headers = register("alice@example.com")
    todo = _create(client, headers, due=in_days(1)).json()["todo"]
    new_due = in_days(10)

    res = client.patch(f"/todo/edit/{todo['id']}", json={"dueDate": new_due}, headers=headers)

    assert res.status_code == 200
    assert datetime.fromisoformat(res.json()["todo"]["dueDate"]) == datetime.fromisoformat(new_due)


def test_update_rejects_past_due_date(client, register, in_days):
    headers = register("alice@example.com")
    todo = _create(client, headers, due=in_days(1)).json()["todo"]

    res = client.patch(f"/todo/edit/{todo['id']}", json={"dueDate": in_days(-1), "done": True}, headers=headers)

    assert res.status_code == 400
    current = client.get(f"/todo/{todo['id']}", headers=headers).json()["todo"]
    assert current["done"] is False
    assert current["dueDate"] == todo["dueDate"]


def test_update_rejects_null_fields(client, register, in_days):
    headers = register("alice@example.com")
    todo = _create(client, headers, due=in_days(1)).json()["todo"]

    res = client.patch(f"/todo/edit/{todo['id']}", json={"dueDate": None}, headers=headers)
    assert res.status_code == 400
    assert res.json() == {"message": "dueDate cannot be null"}


# ---------- Delete ----------

def test_delete_twice(client, register, in_days):
    headers = register("alice@example.com")
    todo = _create(client, headers, due=in_days(1)).json()["todo"]

    first = client.delete(f"/todo/remove/{todo['id']}", headers=headers)
    second = client.delete(f"/todo/remove/{todo['id']}", headers=headers)

    assert first.status_code == 200
    assert first.json() == {"message": "Todo deleted successfully"}
    assert second.status_code == 404
    assert client.get("/todos", headers=headers).json() == {"todos": []}


def test_edit_after_delete_is_not_found(client, register, in_days):
    headers = register("alice@example.com")
    todo = _create(client, headers, due=in_days(1)).json()["todo"]
    client.delete(f"/todo/remove/{todo['id']}", headers=headers)

    res = client.patch(f"/todo/edit/{todo['id']}", json={"done": True}, headers=headers)
    assert res.status_code == 404


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
