"""
Navigation destinations known to the authentication flow.
"""

from dataclasses import dataclass

from portal_auth.domain.user import UserRole


@dataclass(frozen=True)
class Routes:
    """Named destinations. Exactly one home per role, no fallback."""
    admin_home: str = "/dashboard"
    user_home: str = "/user"
    forgot_password: str = "/auth/forgot-password"

    def home_for(self, role: UserRole) -> str:
        """Home route for a role."""
        homes = {
            UserRole.ADMIN: self.admin_home,
            UserRole.USER: self.user_home,
        }
        return homes[role]
