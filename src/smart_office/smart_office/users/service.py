from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..common.validators import parse_enum, require_non_empty
from ..core.constants import DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME, EMPLOYEE_PASSWORD_DIGITS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import SessionUser
from .session_repository import StoreSessionRepository

ADMIN_SESSION_ID = "admin"
ADMIN_DISPLAY_NAME = "Admin User"
ADMIN_EMAIL = "admin@smartoffice.com"


@dataclass(frozen=True)
class LoginResult:
    success: bool
    user: Optional[SessionUser] = None
    message: str = ""


class AuthService:
    """Use case: demo login / logout over the local session record.

    Note: Placeholder auth (plain comparison, employee password = last 4
    characters of the employee id). Not meant for production.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        sessions: StoreSessionRepository,
        *,
        admin_username: str = DEFAULT_ADMIN_USERNAME,
        admin_password: str = DEFAULT_ADMIN_PASSWORD,
    ):
        self._employees = employees
        self._sessions = sessions
        self._admin_username = admin_username
        self._admin_password = admin_password

    def authenticate(self, username: str, password: str, role: Union[Role, str]) -> SessionUser:
        try:
            role = parse_enum(Role, role, "role")
            username = require_non_empty(username, "username")
        except ValidationError:
            raise AuthenticationError("Invalid credentials")
        password = password or ""

        if role == Role.ADMIN:
            if username == self._admin_username and password == self._admin_password:
                return SessionUser(id=ADMIN_SESSION_ID, name=ADMIN_DISPLAY_NAME, role=Role.ADMIN, email=ADMIN_EMAIL)
            raise AuthenticationError("Invalid credentials")

        employee = self._employees.get_by_login(username)
        if not employee:
            raise AuthenticationError("Invalid credentials")

        expected = employee.id[-EMPLOYEE_PASSWORD_DIGITS:]
        if password != expected:
            raise AuthenticationError("Invalid credentials")

        return SessionUser(id=employee.id, name=employee.name, role=Role.EMPLOYEE, email=employee.email)

    def login(self, username: str, password: str, role: Union[Role, str]) -> LoginResult:
        """Never raises for bad credentials: failure is `LoginResult(success=False)`."""
        try:
            user = self.authenticate(username, password, role)
        except AuthenticationError as e:
            return LoginResult(success=False, message=str(e))

        self._sessions.save(user)
        return LoginResult(success=True, user=user)

    def logout(self) -> None:
        self._sessions.clear()

    def current_user(self) -> Optional[SessionUser]:
        return self._sessions.get()

    def check_auth(self, required_role: Optional[Union[Role, str]] = None) -> SessionUser:
        user = self._sessions.get()
        if user is None:
            raise AuthenticationError("Not logged in")

        if required_role is not None and user.role != Role(required_role):
            self.logout()
            raise AuthorizationError("Unauthorized access")
        return user
