from accounts.handlers.views import LoginView, RegisterView

__all__ = ["LoginView", "RegisterView"]
