"""SmartOffice package.

Organized by feature modules (employees, tasks, leaves, users) with a thin
Flask controller layer over service/repository layers. Services read and write
through an optional remote REST backend and fall back to a local store.
"""
from __future__ import annotations

from .container import Container, build_container, build_store
from .context import ServiceContext
from .storage.seed import ensure_seeded

__all__ = ["Container", "ServiceContext", "build_container", "build_store", "ensure_seeded"]
