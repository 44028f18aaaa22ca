"""
Core app - Shared abstractions and utilities.

This app provides:
- The application error taxonomy (errors)
- The JSON response envelope (responses)
- django-ninja exception handlers rendering errors into the envelope (handlers)
- The `seed` management command
"""
