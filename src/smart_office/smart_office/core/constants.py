"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

EMPLOYEES = "employees"
ATTENDANCE = "attendance"
LEAVES = "leaves"
TASKS = "tasks"
DOCUMENTS = "documents"
FINANCES = "finances"
CURRENT_USER = "current_user"
SCHEMA_VERSION = "schema_version"

COLLECTIONS = (EMPLOYEES, ATTENDANCE, LEAVES, TASKS, DOCUMENTS, FINANCES)

DEFAULT_STORAGE_NAMESPACE = "smartoffice_"
CURRENT_SCHEMA_VERSION = 1

# Employee ids of the bootstrap dataset all start with this prefix.
SEED_ID_PREFIX = "CSC"

DEFAULT_REMOTE_TIMEOUT = 5.0

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"
EMPLOYEE_PASSWORD_DIGITS = 4
