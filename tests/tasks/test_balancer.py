from src.smart_office.smart_office.core.enums import TaskStatus
from src.smart_office.smart_office.employees.model import Employee
from src.smart_office.smart_office.tasks.balancer import AssignmentBalancer, count_active_tasks
from src.smart_office.smart_office.tasks.model import Task

A = Employee(id="CSC/22/01/0001", name="A", dept="IT")
B = Employee(id="CSC/22/01/0002", name="B", dept="IT")
C = Employee(id="CSC/22/01/0003", name="C", dept="HR")


def _task(tid: int, emp: Employee, status: TaskStatus = TaskStatus.TODO) -> Task:
    return Task(id=tid, title=f"T{tid}", assigned_to=emp.name, assigned_to_id=emp.id, due_date="2023-10-30", status=status)


def test_picks_least_loaded_employee_in_department():
    tasks = [_task(1, A), _task(2, A, TaskStatus.IN_PROGRESS)]

    chosen = AssignmentBalancer().select_assignee("IT", [A, B, C], tasks)

    assert chosen == B


def test_completed_tasks_are_not_counted():
    tasks = [_task(1, A, TaskStatus.COMPLETED), _task(2, A, TaskStatus.COMPLETED), _task(3, B)]

    assert count_active_tasks([A, B], tasks) == {A.id: 0, B.id: 1}
    assert AssignmentBalancer().select_assignee("IT", [A, B], tasks) == A


def test_tie_goes_to_first_in_roster_order():
    tasks = [_task(1, A), _task(2, B)]

    assert AssignmentBalancer().select_assignee("IT", [B, A], tasks) == B
    assert AssignmentBalancer().select_assignee("IT", [A, B], tasks) == A


def test_other_departments_are_ignored():
    tasks = [_task(1, A), _task(2, B)]

    assert AssignmentBalancer().select_assignee("HR", [A, B, C], tasks) == C


def test_empty_department_returns_none():
    assert AssignmentBalancer().select_assignee("Legal", [A, B, C], []) is None
