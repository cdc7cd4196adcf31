from .auth_controller import router as auth_router
from .profile_controller import router as profile_router
from .error_handlers import register_exception_handlers


__all__ = ["auth_router", "profile_router", "register_exception_handlers"]
