"""Account use cases: registration, login, verification, password and email change."""

from tracker.application.use_cases.accounts.account_operations import AccountService

__all__ = ["AccountService"]
