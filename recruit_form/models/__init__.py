from recruit_form.db.base import Base
from recruit_form.models.draft_entry import RfDraftEntry

__all__ = [
    "Base",
    "RfDraftEntry",
]
