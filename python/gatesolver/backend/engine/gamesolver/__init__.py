from gatesolver.backend.engine.gamesolver.config import SearchConfig, VisitedBackend
from gatesolver.backend.engine.gamesolver.solver import SearchResult, SearchStats, Solver

__all__ = ["SearchConfig", "SearchResult", "SearchStats", "Solver", "VisitedBackend"]
