from datetime import datetime

from src.app.services import email_templates
from src.domain.entities import Task, TaskPriority, Team
from tests.fixtures.factories import make_user


def test_task_assigned_email_escapes_user_content():
    actor = make_user("Olivia <Owner>")
    assignee = make_user("Max Member", "member@taskflow.test")
    task = Task(
        title="Fix <script>alert(1)</script>",
        description="Tom & Jerry",
        created_by=actor.id,
        priority=TaskPriority.high,
        due_date=datetime(2030, 5, 17),
    )

    message = email_templates.task_assigned_email(
        task, assignee, actor, first_assignment=True
    )

    assert message.to == "member@taskflow.test"
    assert message.subject == f"New Task Assigned: {task.title}"
    assert "<script>" not in message.html
    assert "&lt;script&gt;" in message.html
    assert "Olivia &lt;Owner&gt;" in message.html
    assert "Tom &amp; Jerry" in message.html
    assert "Priority: high" in message.html
    assert "Due Date: 2030-05-17" in message.html
    assert f"/taskflow/tasks?taskId={task.id}" in message.html


def test_reassignment_email_omits_details():
    actor = make_user("Olivia Owner")
    assignee = make_user("Max Member", "member@taskflow.test")
    task = Task(title="Ship", description="secret plan", created_by=actor.id)

    message = email_templates.task_assigned_email(
        task, assignee, actor, first_assignment=False
    )

    assert "Task Assigned to You" in message.html
    assert "secret plan" not in message.html


def test_pending_invitation_email_links():
    actor = make_user("Olivia Owner")
    team = Team.create("Core", actor.id, description="Ops")

    message = email_templates.pending_invitation_email(
        team, "new@taskflow.test", "abc123", actor, expires_in_days=7
    )

    assert message.to == "new@taskflow.test"
    assert "/taskflow/invite/abc123" in message.html
    assert "/taskflow/login?invite=abc123" in message.html
    assert "expire in 7 days" in message.html
    assert "<p>Ops</p>" in message.html


def test_welcome_email_carries_temporary_password():
    user = make_user("Nia Newcomer", "nia@taskflow.test")

    message = email_templates.welcome_email(user, "Xy7!secret")

    assert "Xy7!secret" in message.html
    assert "Xy7!secret" in message.text
    assert "Welcome to TaskFlow" in message.html
