from .account_manager import AccountManager

__all__ = ['AccountManager']
