"""Activities bounded context.

Keeps an activity group's supervisors, schedules and student enrollments
mutually consistent, enforces ownership-based authorization for group
mutations, and reconciles membership sets against caller-supplied desired
sets.
"""
