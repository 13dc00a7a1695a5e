"""
Use Cases

Organized by domain folder:
- tasks/: Task engine (CRUD, comments, subtasks, stats)
- time_tracking/: Timer state machine and time entries
- activities/: Task activity log
- notifications/: Notification read-state
- teams/: Teams, memberships and invitations
- admin/: User administration

Import from the subpackages.
"""
