from gatesolver.backend.engine.gamestate.state import GateState

__all__ = ["GateState"]
