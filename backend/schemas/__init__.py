"""
Pydantic schemas for API request and response validation.

Request bodies use strict Pydantic models with explicit types. AI suggestion
records are the one approved use of `Any`: they are passed through unvalidated.
"""
