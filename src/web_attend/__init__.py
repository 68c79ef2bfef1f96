"""Web Attend package.

Feature modules (students, attendance, schedules, users, reports) follow the
same split: a plain domain model, a repository interface backed by the remote
attendance API, a service layer and a thin Flask controller.
"""
