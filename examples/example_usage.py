"""Example: use the service layer without Flask.

Runs local-only unless API_BASE points at a running backend; if that backend
is down every call quietly falls back to the local store.
"""

import importlib

from config import get_settings_module

from src.smart_office.smart_office.container import build_container, build_store
from src.smart_office.smart_office.context import ServiceContext
from src.smart_office.smart_office.storage.seed import ensure_seeded
from src.smart_office.smart_office.tasks.report import summarize_tasks


def main():
    settings = importlib.import_module(get_settings_module())
    store = build_store(namespace=settings.STORAGE_NAMESPACE)
    ensure_seeded(store)
    container = build_container(store=store)

    result = container.auth_service.login("CSC/22/01/0011", "0011", "employee")
    ctx = ServiceContext.from_settings(settings).with_user(result.user)

    my_tasks = container.task_service.list_tasks(ctx, ctx.current_user.id)
    print(summarize_tasks(my_tasks))

    task = container.task_service.decline_task(ctx, my_tasks[0].id)
    print(task)


if __name__ == "__main__":
    main()
