from backend.engine.verifier.verifier import check, step

__all__ = ["check", "step"]
