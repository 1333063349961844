"""API tests package.

End-to-end tests for routes registered through RouteManager, exercised
with TestClient against a real FastAPI app.
"""
