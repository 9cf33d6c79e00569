from services.database import DatabaseService

__all__ = ["DatabaseService"]
