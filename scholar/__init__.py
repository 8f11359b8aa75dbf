"""
Scholar: a small learning-management registry.

Tracks courses, their content, enrolled learners and grades, and exposes
role-scoped services for administrators, instructors and learners.
"""

__version__ = "1.0.0"
__author__ = "Scholar Development Team"
__description__ = "Course, enrollment and grading registry"
