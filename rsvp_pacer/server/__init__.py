"""HTTP API for planning RSVP runs.

WHY: Web and mobile front-ends want the pacing engine without
re-implementing it: post text and speeds, get back the exact schedule.

HOW: app.py defines the FastAPI application; models.py the pydantic
request/response schemas.
"""
