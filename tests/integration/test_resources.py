import pytest


class TestStatuses:

    def test_crud_flow(self, logged_in_client, db_session):
        from crud.status import get_status_by_name

        response = logged_in_client.post("/statuses", data={"name": "new"})
        assert "Status created successfully" in response.text
        status = get_status_by_name(db_session, "new")
        assert status is not None
        status_id = status.id

        assert logged_in_client.get(f"/statuses/{status_id}/edit").status_code == 200
        response = logged_in_client.post(f"/statuses/{status_id}", data={"_method": "patch", "name": "testing"})
        assert "Status updated successfully" in response.text
        assert "testing" in logged_in_client.get("/statuses").text

        response = logged_in_client.post(f"/statuses/{status_id}", data={"_method": "delete"})
        assert "Status deleted successfully" in response.text
        db_session.expire_all()
        assert get_status_by_name(db_session, "testing") is None

    def test_invalid_name_redirects_back_to_form(self, logged_in_client):
        response = logged_in_client.post("/statuses", data={"name": "  "}, follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/statuses/new"

    def test_delete_status_in_use_is_blocked(self, logged_in_client, db_session, make_status, make_task):
        from crud.user import get_user
        from crud.status import get_status

        status = make_status("new")
        status_id = status.id
        make_task("Task", creator=get_user(db_session, logged_in_client.current_user_id), status=status)

        response = logged_in_client.post(f"/statuses/{status_id}", data={"_method": "delete"})
        assert "Failed to delete status: it is used by tasks" in response.text
        db_session.expire_all()
        assert get_status(db_session, status_id) is not None

    def test_missing_status_is_404(self, logged_in_client):
        assert logged_in_client.get("/statuses/99999/edit").status_code == 404
        response = logged_in_client.post("/statuses/99999", data={"_method": "delete"})
        assert response.status_code == 404


class TestLabels:

    def test_crud_flow(self, logged_in_client, db_session):
        from crud.label import get_label_by_name

        assert "Label created successfully" in logged_in_client.post("/labels", data={"name": "bug"}).text
        label_id = get_label_by_name(db_session, "bug").id

        response = logged_in_client.post(f"/labels/{label_id}", data={"_method": "patch", "name": "defect"})
        assert "Label updated successfully" in response.text

        response = logged_in_client.post(f"/labels/{label_id}", data={"_method": "delete"})
        assert "Label deleted successfully" in response.text

    def test_delete_label_in_use_is_blocked(
            self, logged_in_client, db_session, make_status, make_label, make_task
    ):
        from crud.user import get_user

        label = make_label("bug")
        label_id = label.id
        make_task("Task", creator=get_user(db_session, logged_in_client.current_user_id),
                  status=make_status(), labels=[label])

        response = logged_in_client.post(f"/labels/{label_id}", data={"_method": "delete"})
        assert "Failed to delete label: it is attached to tasks" in response.text


@pytest.fixture
def task_setup(logged_in_client, db_session, make_user, make_status, make_label, make_task):
    from crud.user import get_user

    me = get_user(db_session, logged_in_client.current_user_id)
    other = make_user(email="other@example.com", first_name="Other", last_name="Person")
    new = make_status("new")
    done = make_status("done")
    bug = make_label("bug")
    mine = make_task("My task", creator=me, status=new, executor=other, labels=[bug])
    theirs = make_task("Their task", creator=other, status=done, executor=me)
    return {
        "me": me.id,
        "other": other.id,
        "new": new.id,
        "done": done.id,
        "bug": bug.id,
        "mine": mine.id,
        "theirs": theirs.id,
    }


class TestTasks:

    def test_create_task(self, logged_in_client, db_session, task_setup):
        from crud.task import get_tasks

        response = logged_in_client.post("/tasks", data={
            "name": "Fresh task",
            "description": "Details",
            "status_id": str(task_setup["new"]),
            "executor_id": "",
            "label_ids": [str(task_setup["bug"])],
        })
        assert "Task created successfully" in response.text
        db_session.expire_all()
        created = [task for task in get_tasks(db_session) if task.name == "Fresh task"][0]
        assert created.creator_id == task_setup["me"]
        assert created.executor_id is None
        assert [label.id for label in created.labels] == [task_setup["bug"]]

    def test_create_task_without_status_fails(self, logged_in_client, task_setup):
        response = logged_in_client.post("/tasks", data={"name": "No status", "status_id": ""},
                                         follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/tasks/new"

    def test_show_and_edit_pages(self, logged_in_client, task_setup):
        page = logged_in_client.get(f"/tasks/{task_setup['mine']}")
        assert page.status_code == 200
        assert "My task" in page.text
        assert "Other Person" in page.text
        assert "bug" in page.text
        assert logged_in_client.get(f"/tasks/{task_setup['mine']}/edit").status_code == 200
        assert logged_in_client.get("/tasks/new").status_code == 200
        assert logged_in_client.get("/tasks/99999").status_code == 404

    def test_update_task(self, logged_in_client, db_session, task_setup):
        from crud.task import get_task

        response = logged_in_client.post(f"/tasks/{task_setup['mine']}", data={
            "_method": "patch",
            "name": "My task (edited)",
            "status_id": str(task_setup["done"]),
            "executor_id": str(task_setup["me"]),
        })
        assert "Task updated successfully" in response.text
        db_session.expire_all()
        task = get_task(db_session, task_setup["mine"])
        assert task.name == "My task (edited)"
        assert task.status_id == task_setup["done"]
        assert task.executor_id == task_setup["me"]
        assert task.labels == []

    def test_creator_can_delete_task(self, logged_in_client, db_session, task_setup):
        from crud.task import get_task

        response = logged_in_client.post(f"/tasks/{task_setup['mine']}", data={"_method": "delete"})
        assert "Task deleted successfully" in response.text
        db_session.expire_all()
        assert get_task(db_session, task_setup["mine"]) is None

    def test_non_creator_cannot_delete_task(self, logged_in_client, db_session, task_setup):
        from crud.task import get_task

        response = logged_in_client.post(f"/tasks/{task_setup['theirs']}", data={"_method": "delete"},
                                         follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/tasks"
        db_session.expire_all()
        assert get_task(db_session, task_setup["theirs"]) is not None

    @pytest.mark.parametrize("query, expected", [
        ("", {"My task", "Their task"}),
        ("statusId={new}", {"My task"}),
        ("executorId={me}", {"Their task"}),
        ("labelId={bug}", {"My task"}),
        ("hasLabel=true", {"My task"}),
        ("isCreatorUser=true", {"My task"}),
        ("isCreatorUser=false", {"My task", "Their task"}),
        ("isCreatorUser=0", {"My task", "Their task"}),
        ("hasLabel=false", {"Their task"}),
        ("statusId={done}&isCreatorUser=true", set()),
        ("statusId=&executorId=&labelId=", {"My task", "Their task"}),
    ])
    def test_filters(self, logged_in_client, task_setup, query, expected):
        response = logged_in_client.get("/tasks?" + query.format(**task_setup))
        assert response.status_code == 200
        shown = {name for name in ("My task", "Their task") if f">{name}</a>" in response.text}
        assert shown == expected

    def test_invalid_filter_value_redirects(self, logged_in_client, task_setup):
        response = logged_in_client.get("/tasks?statusId=abc", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/tasks"

    def test_invalid_creator_filter_redirects(self, logged_in_client, task_setup):
        response = logged_in_client.get("/tasks?isCreatorUser=maybe", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/tasks"


class TestUnhandledErrors:

    def test_error_is_reported_and_answered_with_500(self, logged_in_client, monkeypatch):
        from main import app

        reported = []

        class FakeReporter:
            def report(self, exc, request=None):
                reported.append((exc, request.url.path))

        def broken(db):
            raise RuntimeError("database exploded")

        monkeypatch.setattr(app.state, "error_reporter", FakeReporter())
        monkeypatch.setattr("crud.status.get_statuses", broken)

        response = logged_in_client.get("/statuses")
        assert response.status_code == 500
        assert "database exploded" not in response.text
        assert len(reported) == 1
        assert isinstance(reported[0][0], RuntimeError)
        assert reported[0][1] == "/statuses"
