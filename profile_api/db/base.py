"""
Base module for importing all models.
This is used by Alembic for migrations and by Database.create_all.
"""

from profile_api.db.session import Base
from profile_api.models.user import User
from profile_api.models.journal import Journal, JournalRevision, JournalTerm
from profile_api.models.profile import Profile, Skill, Experience, Qualification, Certificate

__all__ = [
    "Base",
    "User",
    "Journal",
    "JournalRevision",
    "JournalTerm",
    "Profile",
    "Skill",
    "Experience",
    "Qualification",
    "Certificate",
]
