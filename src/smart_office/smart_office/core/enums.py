from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used by the auth gate."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class TaskStatus(str, Enum):
    """Task status as stored in the tasks collection."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    PENDING_ACCEPTANCE = "Pending Acceptance"
    DECLINED = "Declined"
    COMPLETED = "Completed"


class TaskPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class LeaveStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
