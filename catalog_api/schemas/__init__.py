"""
Pydantic request/response schemas (the API contract).
"""
