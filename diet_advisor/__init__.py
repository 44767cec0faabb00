"""
HbA1c Diet Advisor.

Turns a single HbA1c reading into an AI-generated diet plan with
AI-generated food photos, served as a small FastAPI web application.

Structure:
- domain/: Value objects, plan models, prompts and output parsing
- infrastructure/: OpenAI clients (text + image generation)
- application/: Plan orchestration (content call + image fan-out)
- presentation/: View state, localized labels
- templates/: Jinja2 pages
- tests/: Test suite (unit, integration)
"""

__version__ = "1.0.0"
