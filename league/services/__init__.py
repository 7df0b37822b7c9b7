from .diversification import DiversificationService, SnapshotScore
from .matchups import MatchupService

__all__ = ["DiversificationService", "MatchupService", "SnapshotScore"]
