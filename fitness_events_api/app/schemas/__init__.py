"""
Pydantic schema definitions for API payloads.

Each domain (users, events, reviews, invoices, admin) defines its own
Pydantic models for request and response bodies.  Schemas are
separated from database rows to decouple API representation from
persistence.  JSON keys are camelCase; Python attributes stay
snake_case (see ``base.ApiModel``).
"""
