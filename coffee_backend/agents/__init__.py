"""
AI Components for the Code & Coffee backend.

1. Coffee Sommelier (Single-Shot LLM Workflow)
   - Knowledge lookup + one Gemini call + JSON parsing
   - NOT an ADK agent - uses the Google Gen AI SDK directly
   - Fallback handling lives in coffee_backend/services/
"""
