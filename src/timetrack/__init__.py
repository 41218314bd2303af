"""timetrack package.

Time tracking and project management organized by feature modules (users,
clients, projects, tasks, time entries, absences, reports) with a thin Flask
controller layer on top of service and repository layers.
"""
