from .session import Completed, StudySession, Viewing
from .summary import SessionSummary, Verdict

__all__ = ["StudySession", "Viewing", "Completed", "SessionSummary", "Verdict"]
