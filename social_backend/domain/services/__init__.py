from .ownership_guard import OwnershipGuard

__all__ = ["OwnershipGuard"]
