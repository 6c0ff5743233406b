"""
Pydantic schemas for API request and response validation.

The build recommendation models double as the response schema contract
handed to Gemini, so their field names follow the camelCase JSON the
frontend consumes.
"""
