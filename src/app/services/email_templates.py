"""
Transactional email builders.

Each builder returns a ready EmailMessage. The HTML bodies are Jinja2
templates under src/app/templates/email; the plain-text part is a one-liner.
"""

import os
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, select_autoescape

from config import ApplicationConfig
from src.app.services.email_sender import EmailMessage
from src.domain.entities import Task, Team, User

APP_NAME = "TaskFlow"

current_dir = os.path.dirname(os.path.abspath(__file__))
template_dir = os.path.join(current_dir, "../templates/email")
env = Environment(
    loader=FileSystemLoader(template_dir),
    autoescape=select_autoescape(["html"]),
)


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    template = env.get_template(template_name)
    return template.render(app_name=APP_NAME, **context)


def _frontend_url(path: str) -> str:
    return f"{ApplicationConfig.FRONTEND_URL.rstrip('/')}{path}"


def task_link(task: Task) -> str:
    return _frontend_url(f"/taskflow/tasks?taskId={task.id}")


def team_invite_link(token: str) -> str:
    return _frontend_url(f"/taskflow/teams/join/{token}")


def task_assigned_email(
    task: Task, assignee: User, actor: User, first_assignment: bool
) -> EmailMessage:
    """Mail sent to a user who was given a task (on create or reassignment)"""
    if first_assignment:
        subject = f"New Task Assigned: {task.title}"
        text = f"{actor.name} assigned you a new task: {task.title}"
    else:
        subject = f"Task Assigned: {task.title}"
        text = f"{actor.name} assigned you a task: {task.title}"

    html = render_template(
        "task_assigned.html",
        {
            "first_assignment": first_assignment,
            "assignee_name": assignee.name,
            "actor_name": actor.name,
            "title": task.title,
            "description": task.description,
            "priority": task.priority.value,
            "due_date": task.due_date.date().isoformat() if task.due_date else None,
            "link": task_link(task),
        },
    )
    return EmailMessage(to=assignee.email, subject=subject, text=text, html=html)


def added_to_team_email(team: Team, member: User, actor: User) -> EmailMessage:
    """Mail sent to an existing user added directly to a team"""
    html = render_template(
        "added_to_team.html",
        {
            "member_name": member.name,
            "actor_name": actor.name,
            "team_name": team.name,
            "link": _frontend_url(f"/taskflow/teams/{team.id}"),
        },
    )
    return EmailMessage(
        to=member.email,
        subject=f"You were added to {team.name}",
        text=f'You were added to the team "{team.name}" by {actor.name}.',
        html=html,
    )


def pending_invitation_email(
    team: Team, email: str, token: str, actor: User, expires_in_days: int
) -> EmailMessage:
    """Mail inviting someone without an account to join a team"""
    html = render_template(
        "team_invitation.html",
        {
            "inviter_name": actor.name,
            "team_name": team.name,
            "team_description": team.description,
            "login_link": _frontend_url(f"/taskflow/login?invite={token}"),
            "invite_link": _frontend_url(f"/taskflow/invite/{token}"),
            "valid_days": expires_in_days,
        },
    )
    return EmailMessage(
        to=email,
        subject=f"You've been invited to join {team.name}",
        text=f'You\'ve been invited to join the team "{team.name}" by {actor.name}.',
        html=html,
    )


def welcome_email(user: User, temporary_password: str) -> EmailMessage:
    """Mail carrying the temporary password of an admin-created account"""
    login_url = _frontend_url("/taskflow/login")
    html = render_template(
        "welcome.html",
        {
            "name": user.name,
            "email": user.email,
            "temporary_password": temporary_password,
            "login_link": login_url,
        },
    )
    return EmailMessage(
        to=user.email,
        subject=f"Your {APP_NAME} account",
        text=(
            f"Hello {user.name}, an account was created for you. "
            f"Email: {user.email} Temporary password: {temporary_password} "
            f"Log in at {login_url} and change your password."
        ),
        html=html,
    )
