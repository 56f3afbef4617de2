"""Bootstrap dataset and first-access seeding."""
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List

from ..core.constants import (
    ATTENDANCE,
    CURRENT_SCHEMA_VERSION,
    DOCUMENTS,
    EMPLOYEES,
    FINANCES,
    LEAVES,
    SCHEMA_VERSION,
    SEED_ID_PREFIX,
    TASKS,
)
from .base import CollectionStore

logger = logging.getLogger(__name__)


SEED_DATA: Dict[str, List[Dict[str, Any]]] = {
    EMPLOYEES: [
        {"id": "CSC/22/01/0011", "name": "Kwesi Essel Turkson", "dept": "IT", "position": "Developer", "email": "kwesi.turkson@smartoffice.com", "phone": "123-456-7890", "role": "employee"},
        {"id": "CSC/22/01/0349", "name": "Ellis Fafali Gbewordo", "dept": "HR", "position": "Manager", "email": "ellis.gbewordo@smartoffice.com", "phone": "098-765-4321", "role": "employee"},
        {"id": "CSC/22/01/0217", "name": "Theophilus Tettey Charwetey Martey", "dept": "Finance", "position": "Analyst", "email": "theophilus.martey@smartoffice.com", "phone": "555-555-5555", "role": "employee"},
        {"id": "CSC/22/01/1883", "name": "Selasi Ahiaku", "dept": "Marketing", "position": "Lead", "email": "selasi.ahiaku@smartoffice.com", "phone": "111-222-3333", "role": "employee"},
        {"id": "CSC/22/01/1073", "name": "Michelle Nana Akua Arhin", "dept": "IT", "position": "SysAdmin", "email": "michelle.arhin@smartoffice.com", "phone": "444-444-4444", "role": "employee"},
    ],
    ATTENDANCE: [
        {"id": 1, "date": "2023-10-25", "employeeId": "CSC/22/01/0011", "name": "Kwesi Essel Turkson", "status": "Present", "timeIn": "09:00", "timeOut": "17:00"},
        {"id": 2, "date": "2023-10-25", "employeeId": "CSC/22/01/0349", "name": "Ellis Fafali Gbewordo", "status": "Present", "timeIn": "08:55", "timeOut": "17:10"},
        {"id": 3, "date": "2023-10-25", "employeeId": "CSC/22/01/0217", "name": "Theophilus Tettey Charwetey Martey", "status": "Absent", "timeIn": "-", "timeOut": "-"},
    ],
    LEAVES: [
        {"id": 1, "employeeId": "CSC/22/01/0011", "name": "Kwesi Essel Turkson", "type": "Sick Leave", "startDate": "2023-11-01", "endDate": "2023-11-02", "status": "Approved"},
        {"id": 2, "employeeId": "CSC/22/01/0217", "name": "Theophilus Tettey Charwetey Martey", "type": "Vacation", "startDate": "2023-12-15", "endDate": "2023-12-20", "status": "Pending"},
    ],
    TASKS: [
        {"id": 1, "title": "Update Website", "assignedTo": "Kwesi Essel Turkson", "assignedToId": "CSC/22/01/0011", "dueDate": "2023-10-30", "status": "In Progress", "priority": "High"},
        {"id": 2, "title": "Payroll Processing", "assignedTo": "Theophilus Tettey Charwetey Martey", "assignedToId": "CSC/22/01/0217", "dueDate": "2023-10-28", "status": "Pending Acceptance", "priority": "Medium"},
        {"id": 3, "title": "Recruitment Drive", "assignedTo": "Ellis Fafali Gbewordo", "assignedToId": "CSC/22/01/0349", "dueDate": "2023-11-05", "status": "Completed", "priority": "High"},
        {"id": 4, "title": "Fix Server Issue", "assignedTo": "Michelle Nana Akua Arhin", "assignedToId": "CSC/22/01/1073", "dueDate": "2023-10-29", "status": "To Do", "priority": "High"},
    ],
    DOCUMENTS: [
        {"id": "1", "fileName": "Employee-Handbook.pdf", "category": "Policies", "description": "Company employee handbook and guidelines", "visibility": "Company", "uploadedBy": "Admin User", "uploadDate": "2023-10-01", "size": "3.2 MB"},
        {"id": "2", "fileName": "Q3-Financial-Report.pdf", "category": "Finance", "description": "Q3 2023 financial performance report", "visibility": "Private", "uploadedBy": "Admin User", "uploadDate": "2023-10-15", "size": "5.1 MB"},
        {"id": "3", "fileName": "Project-Charter.docx", "category": "Projects", "description": "New project initiative charter and scope", "visibility": "Department", "uploadedBy": "Ellis Fafali Gbewordo", "uploadDate": "2023-10-20", "size": "1.8 MB"},
    ],
    FINANCES: [
        {"id": "1", "date": "2023-10-15", "category": "Salaries", "department": "IT", "description": "October payroll processing", "amount": "15000", "status": "Approved", "submittedBy": "Admin User", "versionHistory": []},
        {"id": "2", "date": "2023-10-18", "category": "Equipment", "department": "IT", "description": "Laptop purchases for new hires", "amount": "3500", "status": "Pending", "submittedBy": "Michelle Nana Akua Arhin", "versionHistory": []},
        {"id": "3", "date": "2023-10-20", "category": "Training", "department": "HR", "description": "Professional development courses", "amount": "2500", "status": "Approved", "submittedBy": "Ellis Fafali Gbewordo", "versionHistory": []},
    ],
}


def has_legacy_seed_shape(store: CollectionStore) -> bool:
    """Old data files carry no version marker; their first employee id has the seed prefix."""
    employees = store.read(EMPLOYEES)
    if not employees:
        return False
    first_id = employees[0].get("id")
    return isinstance(first_id, str) and first_id.startswith(SEED_ID_PREFIX)


def is_seeded(store: CollectionStore) -> bool:
    version = store.get_item(SCHEMA_VERSION)
    return isinstance(version, int) and version >= CURRENT_SCHEMA_VERSION


def seed_store(store: CollectionStore) -> None:
    """Overwrite every collection with the bootstrap dataset."""
    for name, records in SEED_DATA.items():
        store.write(name, copy.deepcopy(records))
    store.set_item(SCHEMA_VERSION, CURRENT_SCHEMA_VERSION)


def ensure_seeded(store: CollectionStore) -> bool:
    """Seed the store on first access. Returns True when data was written.

    Idempotent: a store carrying the schema marker is left alone, and a store
    that looks like an earlier seed only gets the marker.
    """
    if is_seeded(store):
        return False

    if has_legacy_seed_shape(store):
        store.set_item(SCHEMA_VERSION, CURRENT_SCHEMA_VERSION)
        logger.info("Existing data adopted (schema_version=%s)", CURRENT_SCHEMA_VERSION)
        return False

    logger.info("Seeding bootstrap data")
    seed_store(store)
    return True
