from furnmart.infra.db.models.base import Base
from furnmart.infra.db.models.saved_state import SavedStateRow

__all__ = ["Base", "SavedStateRow"]
