"""Version and build number synchronization across platforms."""

from .service import BuildNumberReconciler, VersionManager

__all__ = ["BuildNumberReconciler", "VersionManager"]
