from taskpace.analysis.router import router as analysis_router

__all__ = ["analysis_router"]
